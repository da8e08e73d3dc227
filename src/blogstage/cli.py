"""CLI interface for Blogstage.

Command-line tool for previewing share links of blog pages.
"""

import logging
import sys
from pathlib import Path

import click
from jinja2 import FileSystemLoader, TemplateError

from blogstage.config import Config
from blogstage.filters import FILTERS
from blogstage.share import share_links
from blogstage.templates import create_environment

logger = logging.getLogger(__name__)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def cli(verbose: bool) -> None:
    """Blogstage - share links for blog pages."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("url")
@click.option(
    "--text",
    "-t",
    default=None,
    help="Tweet text (overrides config)",
)
@click.option(
    "--hashtag",
    "-H",
    "hashtags",
    multiple=True,
    help="Hashtags to add to the tweet, comma-separated; repeatable (overrides config)",
)
@click.option(
    "--site-url",
    default=None,
    help="Base URL for relative page paths (overrides config)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover blogstage.toml)",
)
def share(
    url: str,
    text: str | None,
    hashtags: tuple[str, ...],
    site_url: str | None,
    config_path: Path | None,
) -> None:
    """Print share links for a page URL or path."""
    config = _load_config(config_path).with_overrides(
        site_url=site_url,
        text=text,
        hashtags=_split_hashtags(hashtags) if hashtags else None,
    )

    page_url = config.page_url(url)
    logger.debug(f"Building share links for {page_url}")

    for link in share_links(
        page_url,
        text=config.share.text,
        hashtags=config.share.hashtags,
    ):
        click.echo(f"{link.network}: {link.url}")


@cli.command()
def filters() -> None:
    """List the template filters Blogstage registers."""
    for name in sorted(FILTERS):
        click.echo(name)


@cli.command()
@click.argument("template_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--var",
    "-V",
    "variables",
    multiple=True,
    help="Template variable as KEY=VALUE; repeatable",
)
def render(template_file: Path, variables: tuple[str, ...]) -> None:
    """Render a single template file with the share filters available."""
    context: dict[str, str] = {}
    for item in variables:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--var")
        context[key] = value

    env = create_environment(FileSystemLoader(template_file.parent))
    try:
        output = env.get_template(template_file.name).render(**context)
    except (TemplateError, UnicodeDecodeError, OSError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(output, nl=False)


def _split_hashtags(values: tuple[str, ...]) -> list[str]:
    """Flatten repeated and comma-separated --hashtag values."""
    return [tag for value in values for tag in value.split(",") if tag]


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error.

    Args:
        config_path: Explicit config path, or None to auto-discover

    Returns:
        Loaded configuration

    Raises:
        SystemExit: If the configuration is missing or invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()

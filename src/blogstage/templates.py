"""Jinja2 environment with share filters installed.

Page layouts call the filters directly, e.g.::

    <a href="{{ page.url | twitter_share_url | twitter_with_text(page.title) }}">
"""

from typing import Any

from jinja2 import BaseLoader, Environment, select_autoescape

from blogstage.filters import register_filters


def create_environment(
    loader: BaseLoader | None = None,
    *,
    autoescape: bool = True,
) -> Environment:
    """Create a template environment with the share filters registered.

    Args:
        loader: Template loader (e.g. FileSystemLoader for a layouts directory)
        autoescape: Escape output of .html/.xml templates

    Returns:
        Configured Jinja2 environment
    """
    env = Environment(
        loader=loader,
        autoescape=select_autoescape(["html", "xml"]) if autoescape else False,
        keep_trailing_newline=True,
    )
    register_filters(env)
    return env


def render_string(source: str, **context: Any) -> str:
    """Render a template string without autoescaping."""
    env = create_environment(autoescape=False)
    return env.from_string(source).render(**context)

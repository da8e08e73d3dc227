"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

from blogstage.cli import cli
from blogstage.config import Config
from blogstage.share import facebook_share_url, linkedin_share_url
from click.testing import CliRunner

POST_URL = "https://blog.example.com/posts/monads/"


class TestShareCommand:
    """Tests for the share command."""

    def test__absolute_url__prints_all_networks(self) -> None:
        """Print one line per network."""
        runner = CliRunner()
        with patch.object(Config, "_discover_config", return_value=None):
            result = runner.invoke(cli, ["share", POST_URL])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "Twitter: http://twitter.com/share?url=https%3A%2F%2Fblog.example.com%2Fposts%2Fmonads%2F",
            f"Facebook: {facebook_share_url(POST_URL)}",
            f"LinkedIn: {linkedin_share_url(POST_URL)}",
        ]

    def test__config_defaults__applied_to_twitter(self, tmp_path: Path) -> None:
        """Use configured site URL, text and hashtags."""
        config_file = tmp_path / "blogstage.toml"
        config_file.write_text("""
[site]
url = "https://blog.example.com/"

[share]
text = "Worth a read"
hashtags = ["python", "fp"]
""")

        runner = CliRunner()
        result = runner.invoke(cli, ["share", "posts/monads/", "-c", str(config_file)])

        assert result.exit_code == 0
        twitter_line = result.output.splitlines()[0]
        assert twitter_line.endswith("&text=Worth%20a%20read&hashtags=python,fp")
        assert f"Facebook: {facebook_share_url(POST_URL)}" in result.output

    def test__cli_options__override_config(self, tmp_path: Path) -> None:
        """Replace configured text and hashtags with CLI values."""
        config_file = tmp_path / "blogstage.toml"
        config_file.write_text('[share]\ntext = "old"\nhashtags = ["old"]\n')

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["share", POST_URL, "-c", str(config_file), "-t", "new", "-H", "a", "-H", "b"],
        )

        assert result.exit_code == 0
        assert "&text=new&hashtags=a,b" in result.output
        assert "old" not in result.output

    def test__comma_separated_hashtag__split_into_tags(self) -> None:
        """Split comma-separated --hashtag values into separate tags."""
        runner = CliRunner()
        with patch.object(Config, "_discover_config", return_value=None):
            result = runner.invoke(cli, ["share", "http://x", "-H", "python,fp", "-H", "rust"])

        assert result.exit_code == 0
        assert "&hashtags=python,fp,rust" in result.output
        assert "%2C" not in result.output

    def test__site_url_option__resolves_relative_path(self) -> None:
        """Resolve relative paths against --site-url."""
        runner = CliRunner()
        with patch.object(Config, "_discover_config", return_value=None):
            result = runner.invoke(
                cli,
                ["share", "posts/monads/", "--site-url", "https://blog.example.com/"],
            )

        assert result.exit_code == 0
        assert f"LinkedIn: {linkedin_share_url(POST_URL)}" in result.output

    def test__invalid_config__exits_with_error(self, tmp_path: Path) -> None:
        """Exit 1 with a message for malformed configuration."""
        config_file = tmp_path / "blogstage.toml"
        config_file.write_text("[site]\nurl = 5\n")

        runner = CliRunner()
        result = runner.invoke(cli, ["share", POST_URL, "-c", str(config_file)])

        assert result.exit_code == 1
        assert "site.url must be a string" in result.output

    def test__missing_config_file__fails(self, tmp_path: Path) -> None:
        """Fail when the config file doesn't exist."""
        runner = CliRunner()
        result = runner.invoke(
            cli, ["share", POST_URL, "-c", str(tmp_path / "nonexistent.toml")]
        )

        assert result.exit_code != 0


class TestFiltersCommand:
    """Tests for the filters command."""

    def test__verbose_flag__accepted(self) -> None:
        """Run with debug logging enabled."""
        runner = CliRunner()
        result = runner.invoke(cli, ["-v", "filters"])

        assert result.exit_code == 0
        assert "share_links" in result.output.splitlines()

    def test__lists_filter_names_sorted(self) -> None:
        """Print registered filter names in sorted order."""
        runner = CliRunner()
        result = runner.invoke(cli, ["filters"])

        assert result.exit_code == 0
        names = result.output.splitlines()
        assert names == sorted(names)
        assert "twitter_with_hashtags" in names


class TestRenderCommand:
    """Tests for the render command."""

    def test__html_partial__renders_share_links(self, tmp_path: Path) -> None:
        """Render a template file with variables."""
        template = tmp_path / "share.html"
        template.write_text('<a href="{{ url | facebook_share_url }}">Share</a>\n')

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(template), "-V", f"url={POST_URL}"])

        assert result.exit_code == 0
        assert result.output == f'<a href="{facebook_share_url(POST_URL)}">Share</a>\n'

    def test__malformed_var__usage_error(self, tmp_path: Path) -> None:
        """Reject variables without '='."""
        template = tmp_path / "share.html"
        template.write_text("{{ url }}")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(template), "-V", "url"])

        assert result.exit_code == 2
        assert "KEY=VALUE" in result.output

    def test__undecodable_template__exits_with_error(self, tmp_path: Path) -> None:
        """Exit 1 with a message for templates that are not UTF-8."""
        template = tmp_path / "latin.html"
        template.write_bytes(b"\xff\xfe{{ x }}")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(template)])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test__template_syntax_error__exits_with_error(self, tmp_path: Path) -> None:
        """Exit 1 on template errors."""
        template = tmp_path / "broken.html"
        template.write_text("{% for %}")

        runner = CliRunner()
        result = runner.invoke(cli, ["render", str(template)])

        assert result.exit_code == 1
        assert "Error:" in result.output

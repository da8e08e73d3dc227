"""Configuration management for Blogstage.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from urllib.parse import urljoin, urlsplit

CONFIG_FILENAME = "blogstage.toml"

logger = logging.getLogger(__name__)


@dataclass
class SiteConfig:
    """Site configuration."""

    url: str | None = None


@dataclass
class ShareConfig:
    """Share link defaults."""

    text: str | None = None
    hashtags: list[str] | None = None


@dataclass
class Config:
    """Application configuration."""

    site: SiteConfig
    share: ShareConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for blogstage.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            logger.debug(f"No {CONFIG_FILENAME} found, using defaults")
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(site=SiteConfig(), share=ShareConfig())

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        logger.debug(f"Loading configuration from {path}")
        with path.open("rb") as f:
            data = tomllib.load(f)

        return cls(
            site=cls._parse_site(data.get("site")),
            share=cls._parse_share(data.get("share")),
            config_path=path,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        url = data.get("url")
        if url is not None and not isinstance(url, str):
            raise ValueError("site.url must be a string")

        return SiteConfig(url=url)

    @classmethod
    def _parse_share(cls, data: object) -> ShareConfig:
        """Parse share configuration section.

        Args:
            data: Raw share section data

        Returns:
            ShareConfig instance
        """
        if data is None:
            return ShareConfig()

        if not isinstance(data, dict):
            raise ValueError("share section must be a dictionary")

        text = data.get("text")
        if text is not None and not isinstance(text, str):
            raise ValueError("share.text must be a string")

        hashtags_raw = data.get("hashtags")
        hashtags: list[str] | None = None
        if hashtags_raw is not None:
            if not isinstance(hashtags_raw, list):
                raise ValueError("share.hashtags must be a list")
            hashtags = []
            for item in hashtags_raw:
                if not isinstance(item, str):
                    raise ValueError("share.hashtags items must be strings")
                hashtags.append(item)

        return ShareConfig(text=text, hashtags=hashtags)

    def with_overrides(
        self,
        *,
        site_url: str | None = None,
        text: str | None = None,
        hashtags: list[str] | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config.

        Args:
            site_url: Override site.url
            text: Override share.text
            hashtags: Override share.hashtags

        Returns:
            New Config instance with overrides applied
        """
        site = self.site
        if site_url is not None:
            site = replace(self.site, url=site_url)

        share = self.share
        if text is not None or hashtags is not None:
            share = replace(
                self.share,
                text=text if text is not None else self.share.text,
                hashtags=hashtags if hashtags is not None else self.share.hashtags,
            )

        return replace(self, site=site, share=share)

    def page_url(self, path: str) -> str:
        """Resolve a page path against site.url.

        Absolute URLs and paths without a configured site.url are
        returned unchanged.
        """
        if urlsplit(path).scheme or self.site.url is None:
            return path
        return urljoin(self.site.url, path)

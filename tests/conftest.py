"""Shared test fixtures."""

import pytest
from blogstage.config import Config, ShareConfig, SiteConfig


@pytest.fixture
def blog_config() -> Config:
    """Create a configuration with a site URL and share defaults."""
    return Config(
        site=SiteConfig(url="https://blog.example.com/"),
        share=ShareConfig(text="Worth a read", hashtags=["python"]),
    )

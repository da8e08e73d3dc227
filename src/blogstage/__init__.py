"""Blogstage - share-link template filters for a personal blog."""

from blogstage.filters import FILTERS, FilterConflictError, register_filters
from blogstage.share import (
    ShareLink,
    facebook_share_url,
    linkedin_share_url,
    percent_encode,
    share_links,
    twitter_share_url,
    twitter_with_hashtags,
    twitter_with_text,
)
from blogstage.templates import create_environment

__all__ = [
    "FILTERS",
    "FilterConflictError",
    "ShareLink",
    "create_environment",
    "facebook_share_url",
    "linkedin_share_url",
    "percent_encode",
    "register_filters",
    "share_links",
    "twitter_share_url",
    "twitter_with_hashtags",
    "twitter_with_text",
]

"""Template filter table.

Maps filter names to share-link functions. The table is built once at
import time and is read-only; environments receive a copy of its entries.
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Protocol

from blogstage.share import (
    facebook_share_url,
    linkedin_share_url,
    percent_encode,
    share_links,
    twitter_share_url,
    twitter_with_hashtags,
    twitter_with_text,
)

logger = logging.getLogger(__name__)

FILTERS: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {
        "url_encode": percent_encode,
        "twitter_share_url": twitter_share_url,
        "twitter_with_text": twitter_with_text,
        "twitter_with_hashtags": twitter_with_hashtags,
        "facebook_share_url": facebook_share_url,
        "linkedin_share_url": linkedin_share_url,
        "share_links": share_links,
    }
)


class FilterHost(Protocol):
    """Anything exposing a mutable ``filters`` mapping (e.g. jinja2.Environment)."""

    filters: dict[str, Callable[..., Any]]


class FilterConflictError(ValueError):
    """A filter name is already bound to a different function."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Filter already registered with a different function: {name}")
        self.name = name


def register_filters(env: FilterHost) -> None:
    """Install every share filter into a template environment.

    Registering into an environment that already holds the same functions
    is a no-op.

    Args:
        env: Environment whose filters mapping receives the entries

    Raises:
        FilterConflictError: If a name is bound to another callable.
            The environment is left unchanged.
    """
    for name, func in FILTERS.items():
        existing = env.filters.get(name)
        if existing is not None and existing is not func:
            raise FilterConflictError(name)

    env.filters.update(FILTERS)
    logger.debug(f"Registered {len(FILTERS)} share filters")

"""Share-link builders.

Pure functions composing "share this page" URLs for social networks.
Each builder percent-encodes its inputs and appends them to a fixed prefix.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from urllib.parse import quote

TWITTER_SHARE_URL = "http://twitter.com/share?url="
FACEBOOK_SHARE_URL = "https://www.facebook.com/sharer/sharer.php?u="
LINKEDIN_SHARE_URL = "https://www.linkedin.com/shareArticle?url="


@dataclass(frozen=True)
class ShareLink:
    """Share URL for a single network."""

    network: str
    url: str


def percent_encode(value: object) -> str:
    """Percent-encode a value for a URL query component.

    Every reserved character is escaped, including "/" and ",".
    None encodes to an empty string.
    """
    if value is None:
        return ""
    return quote(str(value), safe="")


def twitter_share_url(url: str) -> str:
    """Build a Twitter share URL for a page."""
    return TWITTER_SHARE_URL + percent_encode(url)


def twitter_with_text(share_url: str, text: str) -> str:
    """Append tweet text to a Twitter share URL."""
    return share_url + "&text=" + percent_encode(text)


def twitter_with_hashtags(share_url: str, hashtags: str | Iterable[str] | None) -> str:
    """Append hashtags to a Twitter share URL.

    Args:
        share_url: URL built by twitter_share_url()
        hashtags: Comma-delimited string or sequence of tags; None means no tags

    Returns:
        share_url with "&hashtags=" and the comma-joined, encoded tags
    """
    if hashtags is None:
        tags: list[str] = []
    elif isinstance(hashtags, str):
        tags = hashtags.split(",")
        # "a,b," and "" split like ["a", "b"] and []
        while tags and not tags[-1]:
            tags.pop()
    else:
        tags = list(hashtags)

    return share_url + "&hashtags=" + ",".join(percent_encode(tag) for tag in tags)


def facebook_share_url(url: str) -> str:
    """Build a Facebook sharer URL for a page."""
    return FACEBOOK_SHARE_URL + percent_encode(url)


def linkedin_share_url(url: str) -> str:
    """Build a LinkedIn share URL for a page."""
    return LINKEDIN_SHARE_URL + percent_encode(url)


def share_links(
    url: str,
    *,
    text: str | None = None,
    hashtags: str | Iterable[str] | None = None,
) -> list[ShareLink]:
    """Build share links for every supported network.

    Text and hashtags only apply to Twitter; the other networks
    take the page URL alone.

    Args:
        url: Page URL to share
        text: Optional tweet text
        hashtags: Optional tags (comma-delimited string or sequence)

    Returns:
        ShareLink list ordered Twitter, Facebook, LinkedIn
    """
    twitter = twitter_share_url(url)
    if text is not None:
        twitter = twitter_with_text(twitter, text)
    if hashtags is not None:
        twitter = twitter_with_hashtags(twitter, hashtags)

    return [
        ShareLink(network="Twitter", url=twitter),
        ShareLink(network="Facebook", url=facebook_share_url(url)),
        ShareLink(network="LinkedIn", url=linkedin_share_url(url)),
    ]

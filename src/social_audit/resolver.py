"""Fallback resolution for Open Graph and Twitter Card meta tags.

Twitter reads Open Graph tags when its own are missing, and Facebook reads
the page title and meta description. ``resolve_metadata`` applies those
fallbacks as an ordered pipeline: later steps read values produced by
earlier ones, so ``FALLBACK_CHAIN`` must stay in this order.
"""

import logging
from typing import Callable, Dict, Mapping, Tuple

from social_audit.constants import (
    FACEBOOK_NAMESPACE,
    TWITTER_NAMESPACE,
    OPEN_GRAPH_PREFIX,
    TABLE_HEADER,
)
from social_audit.models import RawMetadata, ResolvedMetadata

logger = logging.getLogger(__name__)

# (raw basic values, resolved-so-far namespaces) -> fallback value
FallbackSource = Callable[[Mapping[str, str], Dict[str, Dict[str, str]]], str]

DisplayTable = Tuple[Tuple[str, str], ...]


def _basic(key: str) -> FallbackSource:
    return lambda basic, resolved: basic.get(key) or ""


def _resolved(key: str) -> FallbackSource:
    return lambda basic, resolved: resolved[namespace_for(key)].get(key) or ""


def _empty(basic, resolved) -> str:
    return ""


FALLBACK_CHAIN: Tuple[Tuple[str, FallbackSource], ...] = (
    ("og:title", _basic("title")),
    ("og:description", _basic("description")),
    ("og:image", _empty),
    ("twitter:card", _empty),
    ("twitter:image", _resolved("og:image")),
    ("twitter:title", _resolved("og:title")),
    ("twitter:description", _resolved("og:description")),
)


def namespace_for(key: str) -> str:
    """Return the namespace a tag key belongs to."""
    return FACEBOOK_NAMESPACE if key.startswith(OPEN_GRAPH_PREFIX) else TWITTER_NAMESPACE


def resolve_metadata(raw: RawMetadata) -> ResolvedMetadata:
    """Apply the fallback chain to raw page metadata.

    Every tag named in ``FALLBACK_CHAIN`` is guaranteed a string value in the
    result. Empty strings count as absent and trigger the fallback.

    Args:
        raw: Tag values as captured from the page

    Returns:
        ResolvedMetadata with one mapping per namespace
    """
    resolved: Dict[str, Dict[str, str]] = {
        FACEBOOK_NAMESPACE: dict(raw.facebook),
        TWITTER_NAMESPACE: dict(raw.twitter),
    }

    for key, fallback in FALLBACK_CHAIN:
        namespace = resolved[namespace_for(key)]
        if not namespace.get(key):
            namespace[key] = fallback(raw.basic, resolved)
            logger.debug(f"Resolved {key} from fallback")

    return ResolvedMetadata(
        facebook=resolved[FACEBOOK_NAMESPACE],
        twitter=resolved[TWITTER_NAMESPACE],
    )


def meta(resolved: ResolvedMetadata, key: str) -> str:
    """Look up a resolved tag value.

    ``og:`` keys read the Facebook namespace, all other keys the Twitter one.
    Unknown keys yield an empty string.
    """
    return resolved.namespaces[namespace_for(key)].get(key) or ""


def generate_tables(resolved: ResolvedMetadata) -> Dict[str, DisplayTable]:
    """Build the key/value display table for each namespace.

    Rows are sorted by tag key and preceded by ``TABLE_HEADER``.
    """
    tables: Dict[str, DisplayTable] = {}
    for namespace, values in resolved.namespaces.items():
        rows = sorted(values.items(), key=lambda item: item[0])
        tables[namespace] = (TABLE_HEADER,) + tuple(rows)
    return tables

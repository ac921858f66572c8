"""Helpers for turning a user's message tokens into ticker symbols."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .aliases import AliasRegistry, expand_aliases

MENTION_PREFIX = "@"


def remove_mentions(tokens: Iterable[str]) -> List[str]:
    """Drop every ``@mention`` token, keeping the rest in order."""
    return [t for t in tokens if not t.startswith(MENTION_PREFIX)]


def canonicalize_message(tokens: Iterable[str]) -> List[str]:
    """Upper-case each token."""
    return [t.upper() for t in tokens]


def dedupe_slice(tokens: Iterable[str]) -> List[str]:
    """Return tokens in first-seen order with later repeats removed."""
    seen = set()
    out: List[str] = []
    for t in tokens:
        if t not in seen:
            seen.add(t)
            out.append(t)
    return out


def resolve_tickers(
    tokens: Iterable[str], registry: Optional[AliasRegistry] = None
) -> List[str]:
    """Run the full token pipeline and return the tickers to quote.

    Mentions are removed, tokens upper-cased, ``?ALIAS`` tokens expanded,
    and duplicates collapsed. Upper-casing first lets ``?crypto`` match the
    ``CRYPTO`` alias.

    >>> resolve_tickers(["@bot", "aapl", "?faang"])
    ['AAPL', 'FB', 'AMZN', 'NFLX', 'GOOG']
    """
    cleaned = canonicalize_message(remove_mentions(tokens))
    return dedupe_slice(expand_aliases(cleaned, registry))

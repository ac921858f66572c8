"""
Discord Embed Builders
======================

Quote embeds for one or many tickers. Embeds are plain payload dicts ready
to POST to the Discord API.

Single ticker::

    {"title": "GOOG", "url": "...", "description": "Latest Quote: $134.56 (1.23%)",
     "footer": {"text": ""}}

Several tickers get one field each under ``"fields"``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from .models import TickerValue, is_missing

SEARCH_URL = "https://www.google.com/search?q={ticker}"
NO_DATA_TEXT = "No Data"


def search_url(ticker: str) -> str:
    return SEARCH_URL.format(ticker=ticker)


def message_prefix(test_prefix: Optional[str]) -> str:
    """Prefix for plain-text messages: ``"PREFIX: "`` in test mode, else empty."""
    if test_prefix is None:
        return ""
    return f"{test_prefix}: "


def footer_text(test_prefix: Optional[str]) -> str:
    return test_prefix or ""


def _fmt_price(value: Optional[float]) -> str:
    if is_missing(value):
        return "$NaN"
    return f"${value:.2f}"


def _append_change_and_misc(mesg: str, tv: TickerValue) -> str:
    # zero change is treated the same as no change data
    if tv.has_change and tv.change != 0:
        mesg = f"{mesg} ({tv.change:.2f}%)"
    if tv.misc_text:
        mesg = f"{mesg}\n{tv.misc_text}"
    return mesg


def create_message_embed(
    ticker_value: Optional[TickerValue], test_prefix: Optional[str] = None
) -> Optional[Dict[str, Any]]:
    """
    Build the embed for a single ticker quote.

    Parameters
    ----------
    ticker_value : TickerValue or None
        Quote to render. ``None`` yields ``None``.
    test_prefix : str, optional
        Test-server tag shown in the footer.

    Returns
    -------
    Dict[str, Any] or None
        Discord embed payload
    """
    if ticker_value is None:
        return None

    mesg = _append_change_and_misc(
        f"Latest Quote: {_fmt_price(ticker_value.value)}", ticker_value
    )
    return {
        "title": ticker_value.ticker,
        "url": search_url(ticker_value.ticker),
        "description": mesg,
        "footer": {"text": footer_text(test_prefix)},
    }


def create_message_embed_field(ticker_value: TickerValue) -> Dict[str, Any]:
    """Build the embed field for one ticker in a multi-ticker quote."""
    # A price of exactly zero is reported as missing, same as no price.
    if not ticker_value.has_value or ticker_value.value == 0.0:
        return {
            "name": ticker_value.ticker,
            "value": f"{NO_DATA_TEXT} - {ticker_value.misc_text}",
            "inline": False,
        }

    mesg = _append_change_and_misc(_fmt_price(ticker_value.value), ticker_value)
    return {
        "name": ticker_value.ticker,
        "value": mesg,
        "inline": False,
    }


def create_multi_message_embed(
    ticker_values: Iterable[TickerValue], test_prefix: Optional[str] = None
) -> Dict[str, Any]:
    """Build one embed with a field per ticker, in the order given."""
    return {
        "fields": [create_message_embed_field(tv) for tv in ticker_values],
        "footer": {"text": footer_text(test_prefix)},
    }

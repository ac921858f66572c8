from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


def is_missing(number: Optional[float]) -> bool:
    """Return True when ``number`` is absent (None) or NaN."""
    if number is None:
        return True
    return math.isnan(number)


@dataclass(frozen=True)
class TickerValue:
    """A fetched quote for one ticker.

    ``value`` is the latest price and ``change`` the percent change. Either
    may be ``None`` (or NaN, as some quote providers report it) when the
    source has no data. ``misc_text`` carries free-form extra detail shown
    under the price.
    """

    ticker: str
    value: Optional[float] = None
    change: Optional[float] = None
    misc_text: str = ""

    @property
    def has_value(self) -> bool:
        return not is_missing(self.value)

    @property
    def has_change(self) -> bool:
        return not is_missing(self.change)

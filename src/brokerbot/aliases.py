"""Alias registry and ``?ALIAS`` expansion.

An alias is a short name such as ``CRYPTO`` that stands for a fixed,
ordered list of ticker symbols. Users trigger expansion by typing
``?CRYPTO``; unknown aliases pass through untouched.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import get_settings
from .logging_utils import get_logger

log = get_logger("aliases")

ALIAS_PREFIX = "?"

DEFAULT_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "CRYPTO": ("$BTC", "$ETH", "$LTC", "$LINK", "$BCH", "$ZEC"),
        "MEMES": ("THCX", "PLUG", "FCEL", "BLDP", "NVDA"),
        "FAANG": ("FB", "AMZN", "AAPL", "NFLX", "GOOG"),
        "DEFI": ("$UNI", "$YFI", "$COMP", "$MKR", "$AAVE", "$CRV", "$SUSHI"),
    }
)


class AliasRegistry:
    """Read-only mapping from alias name to an ordered tuple of tickers.

    Names are matched exactly (case-sensitive). Entries are copied on
    construction, so later changes to the source mapping are not seen.
    """

    def __init__(self, aliases: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        source = DEFAULT_ALIASES if aliases is None else aliases
        self._aliases: Mapping[str, Tuple[str, ...]] = MappingProxyType(
            {str(name): tuple(tickers) for name, tickers in source.items()}
        )

    def lookup(self, name: str) -> Optional[Tuple[str, ...]]:
        """Return the tickers for ``name`` or None when it is not an alias.

        A single leading ``?`` is ignored, so ``"?CRYPTO"`` and ``"CRYPTO"``
        resolve to the same entry.
        """
        if name.startswith(ALIAS_PREFIX):
            name = name[len(ALIAS_PREFIX):]
        return self._aliases.get(name)

    def names(self) -> List[str]:
        return list(self._aliases)

    def as_mapping(self) -> Mapping[str, Tuple[str, ...]]:
        return self._aliases

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def __repr__(self) -> str:
        return f"AliasRegistry(names={self.names()!r})"

    @classmethod
    def from_json(cls, path: str | Path, include_defaults: bool = True) -> "AliasRegistry":
        """Build a registry from a JSON object of ``{alias: [tickers...]}``.

        Parameters
        ----------
        path : str or Path
            File to read.
        include_defaults : bool
            Start from :data:`DEFAULT_ALIASES`; file entries with the same
            name replace the built-in ones.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        ValueError
            If the file is not a JSON object of string lists.
        """
        p = Path(path)
        with p.open("r", encoding="utf-8") as fh:
            try:
                raw = json.load(fh)
            except json.JSONDecodeError as exc:
                raise ValueError(f"invalid alias file {p}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ValueError(f"alias file {p} must contain a JSON object")

        merged: Dict[str, Sequence[str]] = dict(DEFAULT_ALIASES) if include_defaults else {}
        for name, tickers in raw.items():
            if not isinstance(tickers, list) or not all(isinstance(t, str) for t in tickers):
                raise ValueError(f"alias {name!r} in {p} must map to a list of strings")
            merged[name] = tickers
        log.info("aliases_loaded path=%s count=%d", str(p), len(raw))
        return cls(merged)


_DEFAULT_REGISTRY: Optional[AliasRegistry] = None


def default_registry() -> AliasRegistry:
    """Return the process-wide registry, building it on first use.

    Uses the built-in aliases plus ``ALIASES_FILE`` when configured.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        aliases_file = get_settings().aliases_file
        if aliases_file:
            _DEFAULT_REGISTRY = AliasRegistry.from_json(aliases_file)
        else:
            _DEFAULT_REGISTRY = AliasRegistry()
    return _DEFAULT_REGISTRY


def expand_aliases(
    tokens: Iterable[str], registry: Optional[AliasRegistry] = None
) -> List[str]:
    """Replace each known ``?ALIAS`` token with its tickers, in place.

    Tokens without the ``?`` prefix and unknown aliases are kept as-is.
    Expansions are not scanned again, so an alias listing ``?OTHER`` yields
    the literal ``?OTHER``.
    """
    reg = registry if registry is not None else default_registry()
    out: List[str] = []
    for token in tokens:
        if token.startswith(ALIAS_PREFIX):
            expanded = reg.lookup(token)
            if expanded is not None:
                out.extend(expanded)
                continue
            log.debug("alias_unknown token=%s", token)
        out.append(token)
    return out

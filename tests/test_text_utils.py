import pytest

from brokerbot.aliases import AliasRegistry
from brokerbot.text_utils import (
    canonicalize_message,
    dedupe_slice,
    remove_mentions,
    resolve_tickers,
)

SAMPLES = [
    [],
    ["AAPL"],
    ["@bot", "aapl", "@someone", "tsla"],
    ["a", "b", "a", "c", "b", "a"],
    ["@", "x@y", "@@", "?CRYPTO"],
    ["Gme", "gme", "GME"],
]


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


@pytest.mark.parametrize("tokens", SAMPLES)
def test_remove_mentions_properties(tokens):
    out = remove_mentions(tokens)
    assert not any(t.startswith("@") for t in out)
    assert _is_subsequence(out, tokens)


def test_remove_mentions_keeps_embedded_at():
    assert remove_mentions(["@bot", "x@y", "AAPL"]) == ["x@y", "AAPL"]


@pytest.mark.parametrize("tokens", SAMPLES)
def test_canonicalize_properties(tokens):
    out = canonicalize_message(tokens)
    assert len(out) == len(tokens)
    assert out == [t.upper() for t in tokens]
    assert canonicalize_message(out) == out


@pytest.mark.parametrize("tokens", SAMPLES)
def test_dedupe_properties(tokens):
    out = dedupe_slice(tokens)
    assert len(out) == len(set(out))
    assert set(out) == set(tokens)
    assert dedupe_slice(out) == out


def test_dedupe_first_seen_order():
    assert dedupe_slice(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_dedupe_is_case_sensitive():
    assert dedupe_slice(["gme", "GME"]) == ["gme", "GME"]


def test_empty_inputs():
    assert remove_mentions([]) == []
    assert canonicalize_message([]) == []
    assert dedupe_slice([]) == []
    assert resolve_tickers([]) == []


def test_inputs_not_mutated():
    tokens = ["@bot", "aapl", "aapl"]
    remove_mentions(tokens)
    canonicalize_message(tokens)
    dedupe_slice(tokens)
    assert tokens == ["@bot", "aapl", "aapl"]


def test_resolve_tickers_full_pipeline():
    out = resolve_tickers(["@bot", "aapl", "?faang", "goog"])
    assert out == ["AAPL", "FB", "AMZN", "NFLX", "GOOG"]


def test_resolve_tickers_custom_registry():
    reg = AliasRegistry({"MINE": ["X", "Y"]})
    assert resolve_tickers(["?mine", "?crypto"], reg) == ["X", "Y", "?CRYPTO"]

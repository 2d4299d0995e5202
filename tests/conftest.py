"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from sos.sequence import TokenSequence

# Token list from the package usage example:  $ sos -a A --b=B -c -d --e -t NAME VALUE X Y Z
EXAMPLE_ARGV = ["sos", "-a", "A", "--b=B", "-c", "-d", "--e", "-t", "NAME", "VALUE", "X", "Y", "Z"]


@pytest.fixture
def seq():
    """Return a helper that builds a TokenSequence from variadic strings."""

    def _seq(*tokens: str) -> TokenSequence:
        return TokenSequence.new(*tokens)

    return _seq


@pytest.fixture
def example_argv() -> list[str]:
    """Return a fresh copy of the example token list."""
    return list(EXAMPLE_ARGV)


def assert_tokens(sequence: TokenSequence, expected: list[str]) -> None:
    """Assert that the sequence holds exactly the expected tokens."""
    actual = list(sequence)
    assert actual == expected, f"Expected {expected}, got {actual}"

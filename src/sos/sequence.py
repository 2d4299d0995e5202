"""Immutable token sequence with command-line flag extraction."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from sos.tokens import NOT_FOUND, flag_name, is_flag, split_assignment


@dataclass(frozen=True, slots=True)
class TokenSequence:
    """An ordered, immutable sequence of string tokens.

    Every transforming operation returns a new TokenSequence (and, for the
    extractors, the extracted value) so calls chain fluently::

        seq, prog = TokenSequence.new(*sys.argv).pop()
        seq, verbose = seq.flag("v")
        seq, out = seq.arg("o")

    Nothing here raises for absent flags or out-of-range indices; those
    degrade to empty strings, False, NOT_FOUND or the unchanged sequence.
    """

    tokens: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Copy whatever iterable was given so the caller's list is never shared.
        object.__setattr__(self, "tokens", tuple(self.tokens))

    @classmethod
    def new(cls, *tokens: str) -> TokenSequence:
        """Create a sequence from variadic strings."""
        return cls(tokens)

    # ------------------------------------------------------------------
    # Flag extraction
    # ------------------------------------------------------------------

    def arg(self, name: str) -> tuple[TokenSequence, str]:
        """Return and strip the argument of flag *name*.

        Matches ``-name value`` / ``--name value`` (both tokens removed) or
        ``--name=value`` (the single token removed), whichever comes first.
        An absent flag and a flag with an empty value both yield ``""``.
        """
        for i, token in enumerate(self.tokens):
            if not is_flag(token):
                continue
            stripped = flag_name(token)
            if stripped == name:
                return self.remove(i, 2), self.string(i + 1)
            pair = split_assignment(stripped)
            if pair is not None and pair[0] == name:
                return self.remove(i, 1), pair[1]
        return self, ""

    def flag(self, name: str) -> tuple[TokenSequence, bool]:
        """Return and strip the boolean flag *name*."""
        i = self._find_flag(name)
        if i == NOT_FOUND:
            return self, False
        return self.remove(i, 1), True

    def ternary(self, name: str) -> tuple[TokenSequence, str, str]:
        """Return and strip the two arguments paired with flag *name*."""
        i = self._find_flag(name)
        if i == NOT_FOUND:
            return self, "", ""
        return self.remove(i, 3), self.string(i + 1), self.string(i + 2)

    def _find_flag(self, name: str) -> int:
        for i, token in enumerate(self.tokens):
            if is_flag(token) and flag_name(token) == name:
                return i
        return NOT_FOUND

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def index(self, value: str) -> int:
        """Return the index of the first token equal to *value*, or NOT_FOUND."""
        for i, token in enumerate(self.tokens):
            if token == value:
                return i
        return NOT_FOUND

    def mismatch(self, *values: str) -> int:
        """Return the index of the first token differing from *values*, or NOT_FOUND.

        Positions past the end of the sequence compare as ``""``.
        """
        for i, value in enumerate(values):
            if value != self.string(i):
                return i
        return NOT_FOUND

    def len(self) -> int:
        return len(self.tokens)

    def string(self, i: int) -> str:
        """Return the token at *i*, or ``""`` if *i* is out of range."""
        if 0 <= i < len(self.tokens):
            return self.tokens[i]
        return ""

    def join(self, sep: str) -> str:
        return sep.join(self.tokens)

    def slice(self, i: int, n: int) -> list[str]:
        """Return a copy of up to *n* tokens starting at *i*.

        A negative or oversized *n* takes everything from *i* onwards.
        ``seq.slice(0, -1)`` copies the whole sequence.
        """
        length = len(self.tokens)
        if not 0 <= i < length:
            return []
        if n < 0 or n > length - i:
            n = length - i
        return list(self.tokens[i : i + n])

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------

    def pop(self) -> tuple[TokenSequence, str]:
        """Return the sequence without its first token, and that token.

        An empty sequence pops ``""`` and stays empty.
        """
        if self.tokens:
            return TokenSequence(self.tokens[1:]), self.tokens[0]
        return self, ""

    def push(self, *tokens: str) -> TokenSequence:
        """Prepend *tokens*, in order."""
        return TokenSequence(tokens + self.tokens)

    def insert(self, i: int, *tokens: str) -> TokenSequence:
        """Insert *tokens* before index *i*, or append them if *i* is out of range."""
        if 0 <= i < len(self.tokens):
            return TokenSequence(self.tokens[:i] + tokens + self.tokens[i:])
        return TokenSequence(self.tokens + tokens)

    def remove(self, i: int, n: int) -> TokenSequence:
        """Remove *n* tokens at index *i*, clamped to the tail.

        No-op unless *i* is in range and *n* is at least 1.
        """
        if 0 <= i < len(self.tokens) and n >= 1:
            return TokenSequence(self.tokens[:i] + self.tokens[i + n :])
        return self

    # ------------------------------------------------------------------
    # Python protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    def __str__(self) -> str:
        return self.join(" ")

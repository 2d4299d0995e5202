"""Error types with formatted context."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sos.sequence import TokenSequence


class ConfigError(Exception):
    """Raised when a config file has malformed content."""

    def __init__(self, message: str, path: str = "sos.toml") -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        return f"error: {self.message}\n  --> {self.path}"


class UnconsumedTokensError(Exception):
    """Raised by strict extraction when tokens are left over."""

    def __init__(self, rest: TokenSequence) -> None:
        self.rest = rest
        self.message = f"{len(rest)} unexpected token(s)"
        super().__init__(self.format())

    def format(self) -> str:
        source_line = self.rest.join(" ")
        # Underline each leftover token, at least 1 char even for ""
        carets = " ".join("^" * max(1, len(token)) for token in self.rest)

        gutter = "  |"
        return f"error: {self.message}\n{gutter}\n{gutter} {source_line}\n{gutter} {carets}"

"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from sos.sequence import TokenSequence
from sos.tokens import flag_name, is_flag, split_assignment


def dump_sequence(seq: TokenSequence, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable token listing to *file*."""
    file.write(f"TokenSequence ({len(seq)} tokens)\n")
    width = len(str(max(len(seq) - 1, 0)))
    for i, token in enumerate(seq):
        file.write(f"  {i:>{width}} {token!r}{_describe(token)}\n")


def _describe(token: str) -> str:
    if not is_flag(token):
        return ""
    name = flag_name(token)
    pair = split_assignment(name)
    if pair is not None:
        return f"  Assign {pair[0]}={pair[1]!r}"
    return f"  Flag {name}"

"""Slice-of-strings: parse command-line-like token lists.

Usage::

    $ prog -a A --b=B -c -d --e -t NAME VALUE X Y Z

    seq = TokenSequence.new(*sys.argv)
    seq, prog = seq.pop()
    seq, a = seq.arg("a")              # "A"
    seq, b = seq.flag("b")             # False, "--b=B" carries a value
    if not b:
        seq, b_value = seq.arg("b")    # "B"
    seq, c = seq.flag("c")             # True
    seq, t_name, t_value = seq.ternary("t")  # "NAME", "VALUE"
    seq.mismatch("X", "Y", "Z")        # NOT_FOUND
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sos.sequence import TokenSequence
from sos.tokens import NOT_FOUND

if TYPE_CHECKING:
    from sos.extract import Extraction
    from sos.schema import Schema

__version__ = "0.1.0"

__all__ = ["NOT_FOUND", "TokenSequence", "parse"]


def parse(tokens: list[str], schema: Schema) -> Extraction:
    """Extract the options in *schema* from a copy of *tokens*."""
    from sos.extract import extract

    return extract(TokenSequence(tokens), schema)

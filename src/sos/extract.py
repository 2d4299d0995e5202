"""Apply a Schema to a TokenSequence, collecting the extracted values."""

from __future__ import annotations

from dataclasses import dataclass, field

from sos.errors import UnconsumedTokensError
from sos.schema import Option, OptionKind, Schema
from sos.sequence import TokenSequence

Value = str | bool | tuple[str, str]


@dataclass(frozen=True, slots=True)
class Extraction:
    """Values pulled out of a token sequence, and what was left behind."""

    prog: str
    values: dict[str, Value] = field(default_factory=dict)
    rest: TokenSequence = field(default_factory=TokenSequence)


def extract(seq: TokenSequence, schema: Schema) -> Extraction:
    """Pop the program name (if requested), then apply each option in order."""
    prog = ""
    if schema.prog:
        seq, prog = seq.pop()

    values: dict[str, Value] = {}
    for option in schema.options:
        seq, values[option.name] = _apply(seq, option)

    if schema.strict and seq:
        raise UnconsumedTokensError(seq)
    return Extraction(prog, values, seq)


def _apply(seq: TokenSequence, option: Option) -> tuple[TokenSequence, Value]:
    if option.kind is OptionKind.ARG:
        return seq.arg(option.name)
    if option.kind is OptionKind.FLAG:
        return seq.flag(option.name)
    if option.kind is OptionKind.TERNARY:
        seq, name, value = seq.ternary(option.name)
        return seq, (name, value)
    # OPTION: a bare flag wins, otherwise take its argument
    seq, found = seq.flag(option.name)
    if found:
        return seq, True
    return seq.arg(option.name)

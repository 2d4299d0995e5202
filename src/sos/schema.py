"""Option schema describing which flags to extract, and in what order."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum


class OptionKind(Enum):
    ARG = "arg"  # -name value, --name=value
    FLAG = "flag"  # -name
    OPTION = "option"  # -name, else -name value
    TERNARY = "ternary"  # -name v1 v2


@dataclass(frozen=True, slots=True)
class Option:
    """A single named option to extract."""

    kind: OptionKind
    name: str


@dataclass(frozen=True, slots=True)
class Schema:
    """Ordered options plus extraction switches.

    Options are applied in declaration order; earlier options consume their
    tokens before later ones scan the sequence.
    """

    options: tuple[Option, ...] = ()
    prog: bool = True
    strict: bool = False


def parse_option_spec(s: str) -> Option:
    """Parse a KIND:NAME string into an Option."""
    kind, sep, name = s.partition(":")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"invalid option format (expected KIND:NAME): {s}")
    try:
        option_kind = OptionKind(kind)
    except ValueError:
        kinds = ", ".join(k.value for k in OptionKind)
        raise argparse.ArgumentTypeError(f"unknown option kind {kind!r} (expected one of {kinds})") from None
    return Option(option_kind, name)

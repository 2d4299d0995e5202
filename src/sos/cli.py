"""Command-line interface for sos."""

from __future__ import annotations

import argparse
import sys
import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sos.errors import ConfigError, UnconsumedTokensError
from sos.schema import Option, OptionKind, Schema, parse_option_spec

CONFIG_NAME = "sos.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    tokens: list[str]
    schema: Schema
    sep: str
    json: bool
    debug: bool


def _option_of(kind: OptionKind) -> Callable[[str], Option]:
    def convert(name: str) -> Option:
        if not name:
            raise argparse.ArgumentTypeError(f"empty {kind.value} name")
        return Option(kind, name)

    convert.__name__ = kind.value
    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="sos",
        description="Extract flags and arguments from a token list",
        epilog="Tokens to parse follow '--'; the first one is the program name unless --no-prog.",
    )
    p.add_argument("tokens", nargs="*", metavar="TOKEN", help="Tokens to parse")
    # All option kinds share one destination so declaration order survives.
    p.add_argument(
        "-a",
        "--arg",
        dest="options",
        action="append",
        type=_option_of(OptionKind.ARG),
        metavar="NAME",
        help="Extract the value of -NAME VALUE or --NAME=VALUE (repeatable)",
    )
    p.add_argument(
        "-f",
        "--flag",
        dest="options",
        action="append",
        type=_option_of(OptionKind.FLAG),
        metavar="NAME",
        help="Extract the presence of -NAME (repeatable)",
    )
    p.add_argument(
        "-O",
        "--option",
        dest="options",
        action="append",
        type=_option_of(OptionKind.OPTION),
        metavar="NAME",
        help="Extract -NAME as a flag, else as an argument (repeatable)",
    )
    p.add_argument(
        "-t",
        "--ternary",
        dest="options",
        action="append",
        type=_option_of(OptionKind.TERNARY),
        metavar="NAME",
        help="Extract the pair in -NAME V1 V2 (repeatable)",
    )
    p.add_argument("--no-prog", action="store_true", help="Do not pop a program name first")
    p.add_argument("--strict", action="store_true", help="Fail if any tokens are left over")
    p.add_argument("--sep", default=None, help="Output separator (default: space)")
    p.add_argument("--json", action="store_true", help="Write results as JSON")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump the token list to stderr")
    return p


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", str(path)) from None


def resolve_options(args: argparse.Namespace, base_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags. Config options are applied
    before options given on the command line.
    """
    if base_dir is None:
        base_dir = Path(".")
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir)
    label = str(config_path if config_path is not None else base_dir / CONFIG_NAME)

    # Options: config first, then CLI
    options: list[Option] = []
    cfg_options = config.get("options", [])
    if not isinstance(cfg_options, list):
        raise ConfigError("'options' must be a list of KIND:NAME strings", label)
    for raw in cfg_options:
        if not isinstance(raw, str):
            raise ConfigError(f"option entry must be a string: {raw!r}", label)
        try:
            options.append(parse_option_spec(raw))
        except argparse.ArgumentTypeError as exc:
            raise ConfigError(str(exc), label) from None
    options.extend(args.options or [])

    prog = _config_value(config, "prog", bool, True, label)
    if args.no_prog:
        prog = False

    strict = _config_value(config, "strict", bool, False, label)
    if args.strict:
        strict = True

    sep = _config_value(config, "sep", str, " ", label)
    if args.sep is not None:
        sep = args.sep

    return CliOptions(
        tokens=list(args.tokens),
        schema=Schema(tuple(options), prog=prog, strict=strict),
        sep=sep,
        json=args.json,
        debug=args.debug,
    )


def _config_value(config: dict[str, Any], key: str, kind: type, default: Any, label: str) -> Any:
    value = config.get(key, default)
    if not isinstance(value, kind):
        raise ConfigError(f"'{key}' must be of type {kind.__name__}", label)
    return value


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from sos.debug import dump_sequence
    from sos.extract import extract
    from sos.render import render_json, render_text
    from sos.sequence import TokenSequence

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(exc.format(), file=sys.stderr)
        return 2

    seq = TokenSequence(options.tokens)
    if options.debug:
        dump_sequence(seq, file=sys.stderr)

    try:
        extraction = extract(seq, options.schema)
    except UnconsumedTokensError as exc:
        print(exc.format(), file=sys.stderr)
        return 1

    if options.json:
        sys.stdout.write(render_json(extraction))
    else:
        sys.stdout.write(render_text(extraction, options.sep))
    return 0

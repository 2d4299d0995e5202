"""Render an Extraction as text lines or JSON."""

from __future__ import annotations

import json

from sos.extract import Extraction, Value


def render_text(extraction: Extraction, sep: str = " ") -> str:
    """Render one ``name=value`` line per extracted value.

    Booleans render as ``true``/``false`` and ternary pairs are joined with
    *sep*. A ``prog=`` line leads when a program name was popped, and a
    ``rest=`` line always closes the output.
    """
    lines: list[str] = []
    if extraction.prog:
        lines.append(f"prog={extraction.prog}")
    for name, value in extraction.values.items():
        lines.append(f"{name}={_text_value(value, sep)}")
    lines.append(f"rest={extraction.rest.join(sep)}")
    return "\n".join(lines) + "\n"


def _text_value(value: Value, sep: str) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, tuple):
        return sep.join(value)
    return value


def render_json(extraction: Extraction) -> str:
    """Render as a JSON object with prog, values and rest keys."""
    payload = {
        "prog": extraction.prog,
        "values": {name: list(v) if isinstance(v, tuple) else v for name, v in extraction.values.items()},
        "rest": list(extraction.rest),
    }
    return json.dumps(payload, indent=2) + "\n"

"""Text and JSON rendering of extraction results."""

from __future__ import annotations

import json

from sos.extract import Extraction
from sos.render import render_json, render_text
from sos.sequence import TokenSequence


def _example() -> Extraction:
    return Extraction(
        "sos",
        {"a": "A", "c": True, "f": False, "t": ("NAME", "VALUE")},
        TokenSequence.new("X", "Y", "Z"),
    )


class TestRenderText:
    def test_lines(self) -> None:
        assert render_text(_example()) == (
            "prog=sos\na=A\nc=true\nf=false\nt=NAME VALUE\nrest=X Y Z\n"
        )

    def test_custom_separator(self) -> None:
        out = render_text(_example(), sep=",")
        assert "t=NAME,VALUE\n" in out
        assert out.endswith("rest=X,Y,Z\n")

    def test_no_prog_line_when_empty(self) -> None:
        out = render_text(Extraction("", {"a": ""}, TokenSequence()))
        assert out == "a=\nrest=\n"


class TestRenderJson:
    def test_structure(self) -> None:
        data = json.loads(render_json(_example()))
        assert data == {
            "prog": "sos",
            "values": {"a": "A", "c": True, "f": False, "t": ["NAME", "VALUE"]},
            "rest": ["X", "Y", "Z"],
        }

    def test_trailing_newline(self) -> None:
        assert render_json(Extraction("", {}, TokenSequence())).endswith("}\n")

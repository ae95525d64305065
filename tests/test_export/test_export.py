"""Tests for export module."""

import json

import pytest

from notediagram.constants import DiagramType
from notediagram.diagrams.schemas import GeneratedDiagram
from notediagram.diagrams.synthesizer import generate_diagrams
from notediagram.export import export_diagram, file_extension
from notediagram.export.html import export_html, export_single_diagram_html
from notediagram.export.json_export import (
    export_json,
    export_single_diagram_json,
)


def _make_diagrams() -> list[GeneratedDiagram]:
    return generate_diagrams(
        "class Cart: Base {}\nclass Base {}",
        [DiagramType.CLASS_DIAGRAM, DiagramType.FLOW_CHART],
    )


class TestHtmlExport:
    def test_embeds_svg_verbatim(self) -> None:
        diagrams = _make_diagrams()
        page = export_html(diagrams, "Cart notes")
        for diagram in diagrams:
            assert diagram.svg_markup in page
        assert "<h1>Cart notes</h1>" in page
        assert page.startswith("<!DOCTYPE html>")

    def test_no_external_references(self) -> None:
        page = export_html(_make_diagrams())
        assert "<link" not in page
        assert "<script" not in page
        assert "http://" not in page.replace(
            'xmlns="http://www.w3.org/2000/svg"', ""
        )

    def test_title_escaped(self) -> None:
        page = export_html([], "A & B")
        assert "<title>A &amp; B</title>" in page

    def test_single_diagram_page(self) -> None:
        diagram = _make_diagrams()[0]
        page = export_single_diagram_html(diagram)
        assert diagram.svg_markup in page
        assert f"<figcaption>{diagram.title}</figcaption>" in page


class TestJsonExport:
    def test_envelope(self) -> None:
        payload = json.loads(export_json(_make_diagrams()))
        assert payload["diagram_count"] == 2
        assert payload["diagrams"][0]["type"] == "classDiagram"
        assert payload["diagrams"][0]["display_name"] == "Class Diagram"

    def test_single(self) -> None:
        diagram = _make_diagrams()[1]
        payload = json.loads(export_single_diagram_json(diagram))
        assert payload["id"] == diagram.id
        assert payload["svg_markup"] == diagram.svg_markup


class TestDispatch:
    def test_svg(self) -> None:
        diagram = _make_diagrams()[0]
        assert export_diagram(diagram, "svg").strip() == diagram.svg_markup

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="Unsupported format"):
            export_diagram(_make_diagrams()[0], "pdf")

    def test_file_extension(self) -> None:
        assert file_extension("html") == ".html"
        with pytest.raises(ValueError):
            file_extension("pdf")

"""Tests for the per-type SVG renderers."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from notediagram.diagrams.svg import (
    render_architecture_diagram,
    render_class_diagram,
    render_component_diagram,
    render_flow_chart,
    render_sequence_diagram,
)

NS = {"svg": "http://www.w3.org/2000/svg"}


def _parse(markup: str) -> ET.Element:
    return ET.fromstring(markup)


def _texts(root: ET.Element) -> list[str]:
    return [t.text or "" for t in root.iter(f"{{{NS['svg']}}}text")]


@pytest.mark.parametrize(
    ("render", "size"),
    [
        (render_class_diagram, ("400", "300")),
        (render_sequence_diagram, ("500", "400")),
        (render_flow_chart, ("300", "400")),
        (render_component_diagram, ("400", "300")),
        (render_architecture_diagram, ("400", "350")),
    ],
)
def test_canvas_and_document_shape(render, size) -> None:
    root = _parse(render("anything", "My Title"))
    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert (root.get("width"), root.get("height")) == size
    assert root.get("viewBox") == f"0 0 {size[0]} {size[1]}"
    assert root.find("svg:title", NS).text == "My Title"
    defs = root.find("svg:defs", NS)
    assert defs is not None
    assert defs.find("svg:style", NS) is not None


class TestClassDiagram:
    def test_boxes_stacked_by_index(self, swift_classes: str) -> None:
        root = _parse(render_class_diagram(swift_classes, "t"))
        rects = root.findall("svg:rect", NS)
        assert [r.get("y") for r in rects] == ["50", "130"]
        assert {"User", "AdminUser"} <= set(_texts(root))

    def test_inheritance_when_colon_and_two_classes(
        self, swift_classes: str
    ) -> None:
        markup = render_class_diagram(swift_classes, "t")
        assert 'class="inheritance-line"' in markup
        assert "inheritance</text>" in markup
        assert 'id="arrowhead"' in markup

    def test_no_inheritance_without_colon(self) -> None:
        markup = render_class_diagram("class A {}\nclass B {}", "t")
        assert 'class="inheritance-line"/>' not in markup

    def test_no_inheritance_with_single_class(self) -> None:
        markup = render_class_diagram("class A: Base {}", "t")
        assert "<line" not in markup

    def test_zero_classes_still_valid(self) -> None:
        root = _parse(render_class_diagram("nothing here", "t"))
        assert root.findall("svg:rect", NS) == []


class TestSequenceDiagram:
    def test_actors_and_lifelines(self, sequence_notes: str) -> None:
        root = _parse(render_sequence_diagram(sequence_notes, "t"))
        rects = root.findall("svg:rect", NS)
        assert [r.get("x") for r in rects] == ["40", "160", "280", "400"]
        lifelines = [
            ln for ln in root.findall("svg:line", NS)
            if ln.get("class") == "lifeline"
        ]
        assert len(lifelines) == 4

    def test_messages_spaced_forty_apart(self, sequence_notes: str) -> None:
        root = _parse(render_sequence_diagram(sequence_notes, "t"))
        messages = [
            ln for ln in root.findall("svg:line", NS)
            if ln.get("class") == "message"
        ]
        assert [m.get("y1") for m in messages] == [
            "100", "140", "180", "220", "260",
        ]
        assert "Validate credentials" in _texts(root)

    def test_fallback_actors(self) -> None:
        texts = _texts(_parse(render_sequence_diagram("hello", "t")))
        for name in ("User", "Frontend", "API", "Database"):
            assert name in texts


class TestFlowChart:
    def test_numbered_scenario_shapes(self, numbered_flow: str) -> None:
        root = _parse(render_flow_chart(numbered_flow, "t"))
        ellipses = root.findall("svg:ellipse", NS)
        assert [e.get("cy") for e in ellipses] == ["50", "210"]
        decisions = [
            p for p in root.findall("svg:polygon", NS)
            if p.get("class") == "decision"
        ]
        assert len(decisions) == 1
        assert decisions[0].get("points") == "90,130 150,105 210,130 150,155"
        assert "decision" in _texts(root)

    def test_connectors_between_consecutive_steps(
        self, numbered_flow: str
    ) -> None:
        root = _parse(render_flow_chart(numbered_flow, "t"))
        arrows = root.findall("svg:line", NS)
        assert [(a.get("y1"), a.get("y2")) for a in arrows] == [
            ("75", "105"),
            ("155", "185"),
        ]

    def test_labels_are_previews(self, numbered_flow: str) -> None:
        texts = _texts(_parse(render_flow_chart(numbered_flow, "t")))
        assert "1. Start proces..." in texts
        assert "3. End process..." in texts

    def test_plain_middle_step_is_process_box(self) -> None:
        root = _parse(render_flow_chart("- a\n- load data\n- z", "t"))
        rects = root.findall("svg:rect", NS)
        assert len(rects) == 1
        assert rects[0].get("class") == "process"


class TestComponentDiagram:
    def test_two_column_grid(self) -> None:
        text = "AService BService CService DService"
        root = _parse(render_component_diagram(text, "t"))
        positions = [
            (r.get("x"), r.get("y")) for r in root.findall("svg:rect", NS)
        ]
        assert positions == [
            ("50", "50"),
            ("230", "50"),
            ("50", "150"),
            ("230", "150"),
        ]

    def test_component_caption(self) -> None:
        texts = _texts(_parse(render_component_diagram("x", "t")))
        assert texts.count("component") == 4
        assert "Cache" in texts


class TestArchitectureDiagram:
    def test_layers_stacked(self, layered_notes: str) -> None:
        root = _parse(render_architecture_diagram(layered_notes, "t"))
        rects = root.findall("svg:rect", NS)
        assert [r.get("y") for r in rects] == ["50", "120", "190", "260"]
        texts = _texts(root)
        assert "Presentation Layer" in texts
        assert texts.count("layer") == 4


def test_text_is_escaped() -> None:
    markup = render_flow_chart("- a < b & c\n- x.\n- y.", "R&D <flow>")
    root = _parse(markup)
    assert root.find("svg:title", NS).text == "R&D <flow>"
    assert "- a < b & c..." in _texts(root)


def test_xml_invalid_characters_dropped() -> None:
    markup = render_flow_chart("- a\x01b\n- x\x1f.\n- y\ud800.", "T\x08")
    root = _parse(markup)
    assert root.find("svg:title", NS).text == "T"
    assert "- ab..." in _texts(root)
    assert "\x01" not in markup
    assert "\x1f" not in markup

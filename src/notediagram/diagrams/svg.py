"""SVG renderers: one per diagram type.

Each renderer takes the raw text and the derived title, runs the
matching extractor and lays tokens out with a closed-form formula keyed
by the token's index. Nothing is measured or collision-checked.
Output is a standalone SVG document with inline styles, safe to embed
verbatim in HTML.
"""

from __future__ import annotations

import html
import re

from notediagram.constants import (
    FLOW_STEP_PREVIEW_CHARS,
    SVG_NAMESPACE,
    DiagramType,
)
from notediagram.diagrams.extractors import (
    extract_actors,
    extract_classes,
    extract_components,
    extract_interactions,
    extract_layers,
    extract_steps,
)


# Code points XML 1.0 forbids, including lone surrogates
_XML_INVALID = re.compile(
    r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff\ud800-\udfff]"
)


def _escape(text: str) -> str:
    return html.escape(_XML_INVALID.sub("", text), quote=True)


def _marker(color: str) -> list[str]:
    """Arrowhead marker shared by every line with ``marker-end``."""
    return [
        '<marker id="arrowhead" markerWidth="10" markerHeight="7" '
        'refX="10" refY="3.5" orient="auto">',
        f'<polygon points="0 0, 10 3.5, 0 7" fill="{color}"/>',
        "</marker>",
    ]


def _document(
    diagram_type: DiagramType,
    title: str,
    styles: list[str],
    markers: list[str],
    body: list[str],
) -> str:
    width, height = diagram_type.canvas
    lines = [
        f'<svg xmlns="{SVG_NAMESPACE}" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}">',
        f"<title>{_escape(title)}</title>",
        "<defs>",
        "<style>",
        *styles,
        "</style>",
        *markers,
        "</defs>",
        *body,
        "</svg>",
    ]
    return "\n".join(lines)


def _text(
    x: int,
    y: int,
    content: str,
    css_class: str,
    *,
    anchor: str | None = None,
    font_size: int | None = None,
) -> str:
    attrs = f'x="{x}" y="{y}"'
    if anchor:
        attrs += f' text-anchor="{anchor}"'
    attrs += f' class="{css_class}"'
    if font_size:
        attrs += f' font-size="{font_size}"'
    return f"<text {attrs}>{_escape(content)}</text>"


# ── Class Diagram ────────────────────────────────────────


def render_class_diagram(text: str, title: str) -> str:
    classes = extract_classes(text)
    body: list[str] = []

    for index, name in enumerate(classes):
        y = 50 + index * 80
        body.append(
            f'<rect x="50" y="{y}" width="120" height="60" class="class-box"/>'
        )
        body.append(
            _text(110, y + 35, name, "class-text", anchor="middle")
        )

    # One inheritance hint when a colon suggests ``Sub: Base``
    if ":" in text and len(classes) > 1:
        body.append(
            '<line x1="110" y1="110" x2="110" y2="130" '
            'class="inheritance-line"/>'
        )
        body.append(
            _text(120, 125, "inheritance", "class-text", font_size=10)
        )

    return _document(
        DiagramType.CLASS_DIAGRAM,
        title,
        styles=[
            ".class-box { fill: #f8f9fa; stroke: #343a40; stroke-width: 2; }",
            ".class-text { font-family: Arial; font-size: 14px; "
            "fill: #343a40; }",
            ".inheritance-line { stroke: #007bff; stroke-width: 2; "
            "marker-end: url(#arrowhead); }",
        ],
        markers=_marker("#007bff"),
        body=body,
    )


# ── Sequence Diagram ─────────────────────────────────────


def render_sequence_diagram(text: str, title: str) -> str:
    actors = extract_actors(text)
    interactions = extract_interactions(text)
    body: list[str] = []

    for index, actor in enumerate(actors):
        x = 80 + index * 120
        body.append(
            f'<rect x="{x - 40}" y="20" width="80" height="30" class="actor"/>'
        )
        body.append(_text(x, 40, actor, "text", anchor="middle"))
        body.append(
            f'<line x1="{x}" y1="50" x2="{x}" y2="350" class="lifeline"/>'
        )

    for index, message in enumerate(interactions):
        y = 100 + index * 40
        body.append(
            f'<line x1="80" y1="{y}" x2="200" y2="{y}" class="message"/>'
        )
        body.append(_text(140, y - 5, message, "text", anchor="middle"))

    return _document(
        DiagramType.SEQUENCE_DIAGRAM,
        title,
        styles=[
            ".actor { fill: #e9ecef; stroke: #6c757d; stroke-width: 2; }",
            ".lifeline { stroke: #6c757d; stroke-width: 1; "
            "stroke-dasharray: 5,5; }",
            ".message { stroke: #007bff; stroke-width: 2; "
            "marker-end: url(#arrowhead); }",
            ".text { font-family: Arial; font-size: 12px; fill: #343a40; }",
        ],
        markers=_marker("#007bff"),
        body=body,
    )


# ── Flow Chart ───────────────────────────────────────────


def _is_decision(step: str) -> bool:
    lowered = step.lower()
    return "if" in lowered or "check" in lowered


def render_flow_chart(text: str, title: str) -> str:
    steps = extract_steps(text)
    last = len(steps) - 1
    body: list[str] = []

    for index, step in enumerate(steps):
        y = 50 + index * 80
        if index in (0, last):
            body.append(
                f'<ellipse cx="150" cy="{y}" rx="60" ry="25" '
                'class="start-end"/>'
            )
        elif _is_decision(step):
            body.append(
                f'<polygon points="90,{y} 150,{y - 25} 210,{y} 150,{y + 25}" '
                'class="decision"/>'
            )
            body.append(_text(220, y, "decision", "flow-text"))
        else:
            body.append(
                f'<rect x="90" y="{y - 20}" width="120" height="40" '
                'class="process"/>'
            )

        preview = f"{step[:FLOW_STEP_PREVIEW_CHARS]}..."
        body.append(_text(150, y + 5, preview, "flow-text", anchor="middle"))

        if index < last:
            body.append(
                f'<line x1="150" y1="{y + 25}" x2="150" y2="{y + 55}" '
                'class="arrow"/>'
            )

    return _document(
        DiagramType.FLOW_CHART,
        title,
        styles=[
            ".start-end { fill: #28a745; stroke: #1e7e34; stroke-width: 2; }",
            ".process { fill: #17a2b8; stroke: #117a8b; stroke-width: 2; }",
            ".decision { fill: #ffc107; stroke: #e0a800; stroke-width: 2; }",
            ".flow-text { font-family: Arial; font-size: 11px; "
            "fill: #343a40; }",
            ".arrow { stroke: #343a40; stroke-width: 2; "
            "marker-end: url(#arrowhead); }",
        ],
        markers=_marker("#343a40"),
        body=body,
    )


# ── Component Diagram ────────────────────────────────────


def render_component_diagram(text: str, title: str) -> str:
    components = extract_components(text)
    body: list[str] = []

    for index, component in enumerate(components):
        x = 50 + (index % 2) * 180
        y = 50 + (index // 2) * 100
        body.append(
            f'<rect x="{x}" y="{y}" width="150" height="60" class="component"/>'
        )
        body.append(
            _text(x + 75, y + 35, component, "component-text", anchor="middle")
        )
        body.append(
            _text(x + 10, y + 15, "component", "component-text", font_size=10)
        )

    return _document(
        DiagramType.COMPONENT_DIAGRAM,
        title,
        styles=[
            ".component { fill: #e7f3ff; stroke: #0066cc; stroke-width: 2; }",
            ".component-text { font-family: Arial; font-size: 12px; "
            "fill: #0066cc; }",
            ".connection { stroke: #6c757d; stroke-width: 1; }",
        ],
        markers=[],
        body=body,
    )


# ── Architecture Diagram ─────────────────────────────────


def render_architecture_diagram(text: str, title: str) -> str:
    layers = extract_layers(text)
    body: list[str] = []

    for index, layer in enumerate(layers):
        y = 50 + index * 70
        body.append(
            f'<rect x="50" y="{y}" width="300" height="50" class="layer"/>'
        )
        body.append(_text(200, y + 30, layer, "layer-text", anchor="middle"))
        body.append(_text(60, y + 15, "layer", "layer-label"))

    return _document(
        DiagramType.ARCHITECTURE_DIAGRAM,
        title,
        styles=[
            ".layer { fill: #f8f9fa; stroke: #6c757d; stroke-width: 2; }",
            ".layer-text { font-family: Arial; font-size: 14px; "
            "fill: #343a40; }",
            ".layer-label { font-family: Arial; font-size: 10px; "
            "fill: #6c757d; }",
        ],
        markers=[],
        body=body,
    )

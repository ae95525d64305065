"""HTML export: diagrams embedded verbatim in a single page."""

from __future__ import annotations

import html

from notediagram.diagrams.schemas import GeneratedDiagram


def export_html(
    diagrams: list[GeneratedDiagram],
    title: str = "Diagrams",
) -> str:
    """Export diagrams as one styled HTML document."""
    body_parts: list[str] = [f"<h1>{html.escape(title)}</h1>"]
    for diagram in diagrams:
        body_parts.append(_figure(diagram))
    return _wrap_html("\n".join(body_parts), title)


def export_single_diagram_html(diagram: GeneratedDiagram) -> str:
    """Export one diagram as a standalone HTML page."""
    return _wrap_html(_figure(diagram), diagram.title)


def _figure(diagram: GeneratedDiagram) -> str:
    # SVG markup is already escaped internally; embed as-is
    return (
        f'<figure id="{html.escape(diagram.id)}" '
        f'data-type="{html.escape(diagram.type.value)}">\n'
        f"{diagram.svg_markup}\n"
        f"<figcaption>{html.escape(diagram.title)}</figcaption>\n"
        "</figure>"
    )


def _wrap_html(body: str, title: str) -> str:
    """Wrap body in a full HTML document."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{html.escape(title)}</title>
<style>
body {{
  font-family: system-ui, sans-serif;
  max-width: 900px; margin: 2em auto;
  padding: 0 1em; line-height: 1.6;
}}
figure {{ margin: 0 0 2em; padding: 1em; border: 1px solid #ddd; border-radius: 6px; }}
figcaption {{ color: #6c757d; font-size: 0.9em; margin-top: 0.5em; }}
</style>
</head>
<body>
{body}
</body>
</html>"""

"""Export module: write diagrams as SVG, HTML or JSON."""

from collections.abc import Callable

from notediagram.constants import ExportFormat
from notediagram.diagrams.schemas import GeneratedDiagram
from notediagram.export.html import export_html, export_single_diagram_html
from notediagram.export.json_export import (
    export_json,
    export_single_diagram_json,
)

__all__ = [
    "export_diagram",
    "export_html",
    "export_json",
    "export_single_diagram_html",
    "export_single_diagram_json",
    "file_extension",
]


def _export_svg(diagram: GeneratedDiagram) -> str:
    return diagram.svg_markup + "\n"


_DIAGRAM_EXPORTERS: dict[str, Callable[[GeneratedDiagram], str]] = {
    ExportFormat.SVG: _export_svg,
    ExportFormat.HTML: export_single_diagram_html,
    ExportFormat.JSON: export_single_diagram_json,
}


def export_diagram(diagram: GeneratedDiagram, fmt: str = "svg") -> str:
    """Dispatch export for a single diagram by format string."""
    exporter = _DIAGRAM_EXPORTERS.get(fmt)
    if exporter is None:
        valid = ", ".join(_DIAGRAM_EXPORTERS)
        msg = f"Unsupported format: {fmt}. Use: {valid}"
        raise ValueError(msg)
    return exporter(diagram)


def file_extension(fmt: str) -> str:
    """File suffix (with dot) for an export format."""
    return f".{ExportFormat(fmt).value}"

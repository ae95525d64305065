"""CLI entry point: ``notediagram analyze|suggest|diagram|serve``."""

from __future__ import annotations

from notediagram.logging_config import setup_logging

setup_logging("WARNING")

import argparse  # noqa: E402
import json  # noqa: E402
import logging  # noqa: E402
import sys  # noqa: E402
from pathlib import Path  # noqa: E402

from notediagram import __version__  # noqa: E402
from notediagram.analysis.advisor import suggest_diagram_types  # noqa: E402
from notediagram.analysis.classifier import analyze_content  # noqa: E402
from notediagram.config import Settings  # noqa: E402
from notediagram.constants import (  # noqa: E402
    EMPTY_CONTENT_MESSAGE,
    DiagramType,
    ExportFormat,
)
from notediagram.diagrams.schemas import GeneratedDiagram  # noqa: E402
from notediagram.diagrams.synthesizer import generate_diagrams  # noqa: E402
from notediagram.errors import (  # noqa: E402
    UnsupportedDiagramTypeError,
    parse_diagram_type,
)

logger = logging.getLogger(__name__)

EXIT_EMPTY_INPUT = 1
EXIT_BAD_TYPE = 2


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"notediagram {__version__}")
        return

    if getattr(args, "verbose", False):
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "analyze":
        _run_analyze(args)
    elif args.command == "suggest":
        _run_suggest(args)
    elif args.command == "diagram":
        _run_diagram(args)
    elif args.command == "serve":
        _run_serve(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="notediagram",
        description=(
            "Classify free-form notes and synthesize SVG diagrams "
            "from their structure."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    analyze = sub.add_parser("analyze", help="Classify a note")
    _add_source(analyze)
    analyze.add_argument(
        "--json",
        action="store_true",
        help="Print the analysis as JSON",
    )

    suggest = sub.add_parser(
        "suggest", help="List suggested diagram types"
    )
    _add_source(suggest)

    diagram = sub.add_parser("diagram", help="Render diagrams")
    _add_source(diagram)
    which = diagram.add_mutually_exclusive_group()
    which.add_argument(
        "--type",
        "-t",
        dest="diagram_type",
        default=None,
        help=(
            "Diagram type, e.g. classDiagram or 'Flow Chart' "
            "(default: suggested types)"
        ),
    )
    which.add_argument(
        "--all",
        action="store_true",
        help="Render every type in DEFAULT_DIAGRAM_TYPES",
    )
    diagram.add_argument(
        "--output-dir",
        "-o",
        default=None,
        help="Output directory (default: OUTPUT_DIR setting)",
    )
    diagram.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.SVG.value,
        help="Export format (default: svg)",
    )

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument(
        "--host",
        default="127.0.0.1",
        help="Bind address (default: 127.0.0.1)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port (default: 8000)",
    )

    return parser


def _add_source(sub: argparse.ArgumentParser) -> None:
    sub.add_argument(
        "source",
        nargs="?",
        default="-",
        help="Text file to read, or '-' for stdin (default)",
    )
    sub.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        print(f"Error: {path} does not exist", file=sys.stderr)
        sys.exit(1)
    return path.read_text(encoding="utf-8", errors="replace")


def _run_analyze(args: argparse.Namespace) -> None:
    """Execute the analyze command."""
    result = analyze_content(_read_source(args.source))

    if args.json:
        print(json.dumps(result.to_payload(), indent=2))
        return

    patterns = sorted(p.value for p in result.patterns)
    print(f"Category:   {result.content_category}")
    print(f"Language:   {result.language or '-'}")
    print(f"Patterns:   {', '.join(patterns) or '-'}")
    print(f"Confidence: {result.confidence:.0%}")
    print(
        "Suggested:  "
        + (
            ", ".join(
                t.display_name for t in result.suggested_diagram_types
            )
            or "-"
        )
    )


def _run_suggest(args: argparse.Namespace) -> None:
    """Execute the suggest command."""
    for diagram_type in suggest_diagram_types(_read_source(args.source)):
        print(diagram_type.value)


def _run_diagram(args: argparse.Namespace) -> None:
    """Execute the diagram command."""
    settings = Settings()
    text = _read_source(args.source)

    if args.diagram_type:
        try:
            types = [parse_diagram_type(args.diagram_type)]
        except UnsupportedDiagramTypeError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(EXIT_BAD_TYPE)
    elif args.all:
        types = list(settings.default_diagram_types)
    else:
        types = suggest_diagram_types(text) or list(DiagramType)

    diagrams = generate_diagrams(text, types)
    if not diagrams:
        print(EMPTY_CONTENT_MESSAGE, file=sys.stderr)
        sys.exit(EXIT_EMPTY_INPUT)

    output_dir = Path(args.output_dir or settings.output_dir)
    for path in _write_output(diagrams, output_dir, args.format):
        print(path)


def _write_output(
    diagrams: list[GeneratedDiagram],
    output_dir: Path,
    fmt: str,
) -> list[Path]:
    """Write one file per diagram; HTML also gets a combined index page."""
    from notediagram.export import export_diagram, file_extension
    from notediagram.export.html import export_html

    output_dir.mkdir(parents=True, exist_ok=True)
    ext = file_extension(fmt)

    written: list[Path] = []
    for i, diagram in enumerate(diagrams, 1):
        path = output_dir / f"{i:02d}-{diagram.type.value}{ext}"
        path.write_text(export_diagram(diagram, fmt), encoding="utf-8")
        written.append(path)

    if fmt == ExportFormat.HTML:
        index = output_dir / "index.html"
        index.write_text(export_html(diagrams), encoding="utf-8")
        written.append(index)

    logger.info(
        "event=diagrams_written count=%d dir=%s format=%s",
        len(diagrams),
        output_dir,
        fmt,
    )
    return written


def _run_serve(args: argparse.Namespace) -> None:
    """Run the FastAPI app under uvicorn."""
    import uvicorn

    uvicorn.run(
        "notediagram.main:app",
        host=args.host,
        port=args.port,
    )


if __name__ == "__main__":
    main()

"""Error types raised at the package boundary.

The core itself never raises for recoverable conditions: empty input
yields ``None`` and extraction misses fall back to generic content.
These exceptions exist for callers (CLI, API) that need to reject bad
input before it reaches the core.
"""

from __future__ import annotations

from notediagram.constants import EMPTY_CONTENT_MESSAGE, DiagramType


class NoteDiagramError(Exception):
    """Base class for package errors."""


class UnsupportedDiagramTypeError(NoteDiagramError, ValueError):
    """A diagram type outside the closed enumeration was requested."""

    def __init__(self, value: object) -> None:
        self.value = value
        self.valid = [t.value for t in DiagramType]
        super().__init__(
            f"Unknown diagram type '{value}'. "
            f"Valid: {', '.join(self.valid)}"
        )


class EmptyContentError(NoteDiagramError):
    """Caller asked to diagram empty text."""

    def __init__(self) -> None:
        super().__init__(EMPTY_CONTENT_MESSAGE)


def parse_diagram_type(value: str | DiagramType) -> DiagramType:
    """Resolve a diagram type from its tag.

    Accepts the canonical tag (``classDiagram``) or the display name
    (``Class Diagram``), case-insensitively.
    """
    if isinstance(value, DiagramType):
        return value
    needle = str(value).strip().lower()
    for member in DiagramType:
        if needle in (member.value.lower(), member.display_name.lower()):
            return member
    raise UnsupportedDiagramTypeError(value)

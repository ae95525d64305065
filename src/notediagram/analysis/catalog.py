"""Declarative heuristic tables consumed by the analyzers and extractors.

Each table is an ordered tuple of :class:`PatternEntry`. Order matters
wherever the first match wins (language detection) or output order is
canonical (diagram suggestions, layers). Adding a language or a trigger
is a data change here, never new control flow elsewhere.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from notediagram.constants import ContentPattern, DiagramType, Language


@dataclass(frozen=True)
class PatternEntry:
    """A named match expression."""

    tag: str
    expression: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.expression.search(text) is not None


def _regex(tag: str, pattern: str, flags: int = 0) -> PatternEntry:
    return PatternEntry(tag=tag, expression=re.compile(pattern, flags))


def _keywords(tag: str, *words: str) -> PatternEntry:
    """Entry that fires when any literal word occurs (case-sensitive)."""
    alternation = "|".join(re.escape(w) for w in words)
    return PatternEntry(tag=tag, expression=re.compile(alternation))


def first_match(
    entries: Iterable[PatternEntry], text: str
) -> PatternEntry | None:
    """Return the first entry (in declaration order) matching *text*."""
    for entry in entries:
        if entry.matches(text):
            return entry
    return None


def all_matches(
    entries: Iterable[PatternEntry], text: str
) -> list[PatternEntry]:
    """Return every entry matching *text*, in declaration order."""
    return [entry for entry in entries if entry.matches(text)]


# ── Language Signatures (priority order) ─────────────────
# Swift is checked first, so generic ``class``/``func`` tokens resolve
# to Swift even when another language would fit better.

LANGUAGE_SIGNATURES: tuple[PatternEntry, ...] = (
    _regex(
        Language.SWIFT,
        r"func\s+\w+|class\s+\w+|struct\s+\w+|var\s+\w+|let\s+\w+",
    ),
    _regex(
        Language.JAVASCRIPT,
        r"function\s+\w+|const\s+\w+|require\(|=>|console\.log",
    ),
    _regex(
        Language.PYTHON,
        r"def\s+\w+|import\s+\w+|if\s+__name__|print\(",
    ),
    _regex(
        Language.JAVA,
        r"public\s+class|public\s+static|import\s+java",
    ),
    _regex(
        Language.TYPESCRIPT,
        r"interface\s+\w+|type\s+\w+|:\s*\w+\[\]",
    ),
    _regex(
        Language.CSHARP,
        r"public\s+class|using\s+System|namespace\s+\w+",
    ),
    _regex(
        Language.GO,
        r'func\s+\w+|package\s+\w+|import\s+"',
    ),
    _regex(
        Language.RUST,
        r"fn\s+\w+|struct\s+\w+|impl\s+\w+|use\s+\w+",
    ),
)

# ── Structural Pattern Signatures ────────────────────────

STRUCTURAL_SIGNATURES: tuple[PatternEntry, ...] = (
    _regex(
        ContentPattern.CLASS_DEFINITION,
        r"class\s+\w+|struct\s+\w+|interface\s+\w+",
    ),
    _regex(
        ContentPattern.FUNCTION_DEFINITION,
        r"func\s+\w+|function\s+\w+|def\s+\w+",
    ),
    _keywords(
        ContentPattern.API_ENDPOINT,
        "GET", "POST", "PUT", "DELETE", "/api/", "endpoint",
    ),
    _keywords(
        ContentPattern.SYSTEM_ARCHITECTURE,
        "architecture", "system", "frontend", "backend",
    ),
    _keywords(
        ContentPattern.DATABASE_DESIGN,
        "database", "table", "SQL", "schema",
    ),
)

# ── Diagram Suggestion Triggers (canonical order) ────────

DIAGRAM_TRIGGERS: tuple[PatternEntry, ...] = (
    _keywords(DiagramType.CLASS_DIAGRAM, "class ", "struct ", "interface "),
    PatternEntry(
        tag=DiagramType.SEQUENCE_DIAGRAM,
        expression=re.compile(
            r"->|API|request|response|\d+\."
        ),
    ),
    _keywords(
        DiagramType.FLOW_CHART,
        "if", "else", "switch", "while", "process", "step",
    ),
    _keywords(
        DiagramType.COMPONENT_DIAGRAM,
        "component", "service", "module", "layer",
    ),
    _keywords(
        DiagramType.ARCHITECTURE_DIAGRAM,
        "architecture", "system", "frontend", "backend", "database", "layer",
    ),
)

# ── Content Category Cues ────────────────────────────────

ARCHITECTURE_CUES = _keywords(
    "architecture", "architecture", "system", "component", "layer"
)

# ── Structure Extraction Signatures ──────────────────────

CLASS_DECLARATIONS: tuple[re.Pattern[str], ...] = (
    re.compile(r"class\s+(\w+)"),
    re.compile(r"struct\s+(\w+)"),
    re.compile(r"interface\s+(\w+)"),
)

MAIN_CLASS_DECLARATION = CLASS_DECLARATIONS[0]

COMPONENT_SUFFIXES: tuple[re.Pattern[str], ...] = (
    re.compile(r"\w+Service"),
    re.compile(r"\w+Component"),
    re.compile(r"\w+Manager"),
    re.compile(r"\w+Controller"),
)

LAYER_KEYWORDS: tuple[str, ...] = (
    "presentation",
    "business",
    "data",
    "frontend",
    "backend",
    "ui",
    "api",
    "database",
)

ARROW_TOKEN = "->"

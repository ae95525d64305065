"""Rule-based content classification over the pattern catalog."""

from __future__ import annotations

import logging

from notediagram.analysis.advisor import suggest_diagram_types
from notediagram.analysis.catalog import (
    ARCHITECTURE_CUES,
    LANGUAGE_SIGNATURES,
    STRUCTURAL_SIGNATURES,
    all_matches,
    first_match,
)
from notediagram.analysis.schemas import AnalysisResult
from notediagram.constants import (
    LONG_TEXT_THRESHOLD,
    ConfidenceWeight,
    ContentCategory,
    ContentPattern,
    Language,
)

logger = logging.getLogger(__name__)


def detect_language(text: str) -> Language | None:
    """Return the first language whose signature occurs in *text*.

    Signatures are tried in fixed priority order, so overlapping
    matches resolve to the earlier language rather than the best fit.
    """
    entry = first_match(LANGUAGE_SIGNATURES, text)
    if entry is None:
        return None
    return Language(entry.tag)


def classify_content_category(
    text: str, language: Language | None
) -> ContentCategory:
    """Coarse category; a detected language always means code."""
    if language is not None:
        return ContentCategory.CODE
    if ARCHITECTURE_CUES.matches(text):
        return ContentCategory.ARCHITECTURE
    return ContentCategory.TEXT


def detect_patterns(text: str) -> frozenset[ContentPattern]:
    """Every structural signature that matches contributes its tag."""
    return frozenset(
        ContentPattern(entry.tag)
        for entry in all_matches(STRUCTURAL_SIGNATURES, text)
    )


def compute_confidence(
    text: str,
    language: Language | None,
    patterns: frozenset[ContentPattern] | set[ContentPattern],
) -> float:
    """Weighted sum of fired heuristics, clamped to [0.0, 1.0]."""
    score = 0.0
    if language is not None:
        score += ConfidenceWeight.LANGUAGE
    score += len(patterns) * ConfidenceWeight.PER_PATTERN
    if len(text) > LONG_TEXT_THRESHOLD:
        score += ConfidenceWeight.LONG_TEXT
    # Round away float drift (0.3 + 0.2 + ... != 0.7 exactly)
    return round(min(max(score, 0.0), ConfidenceWeight.CEILING), 10)


def analyze_content(text: str) -> AnalysisResult:
    """Run every heuristic over *text* and bundle the results.

    Never raises; empty text yields a language-less, zero-confidence
    result.
    """
    language = detect_language(text)
    category = classify_content_category(text, language)
    patterns = detect_patterns(text)
    confidence = compute_confidence(text, language, patterns)
    suggestions = suggest_diagram_types(text)

    logger.debug(
        "event=content_analyzed chars=%d language=%s category=%s "
        "patterns=%d confidence=%.2f suggestions=%d",
        len(text),
        language or "none",
        category,
        len(patterns),
        confidence,
        len(suggestions),
    )

    return AnalysisResult(
        content_category=category,
        language=language,
        patterns=patterns,
        confidence=confidence,
        suggested_diagram_types=tuple(suggestions),
    )

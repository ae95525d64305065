"""Content analysis: language, category, patterns, diagram suggestions."""

from notediagram.analysis.advisor import suggest_diagram_types
from notediagram.analysis.classifier import (
    analyze_content,
    classify_content_category,
    compute_confidence,
    detect_language,
    detect_patterns,
)
from notediagram.analysis.schemas import AnalysisResult

__all__ = [
    "AnalysisResult",
    "analyze_content",
    "classify_content_category",
    "compute_confidence",
    "detect_language",
    "detect_patterns",
    "suggest_diagram_types",
]

"""Exhaustive checks of classifier and extractor invariants."""

from __future__ import annotations

from itertools import chain, combinations

import pytest

from notediagram.analysis.classifier import (
    analyze_content,
    classify_content_category,
    compute_confidence,
    detect_language,
)
from notediagram.constants import (
    FALLBACK_ACTORS,
    ContentCategory,
    ContentPattern,
    Language,
)
from notediagram.diagrams.extractors import extract_actors

_FRAGMENTS = [
    "class Foo ",
    "struct Bar ",
    "func go() ",
    "def run(): ",
    "GET /api/items ",
    "system ",
    "frontend ",
    "database table ",
    "SQL schema ",
    "-> ",
    "step ",
    "layer ",
    "plain words ",
]

_SAMPLES = [
    "",
    " ",
    "\n\n",
    "hello world",
    "ünïcödé → arrows ⇒",
    "<script>&amp;</script>",
    "class" * 50,
    "".join(_FRAGMENTS),
    "".join(_FRAGMENTS) * 5,
    *_FRAGMENTS,
]


def _pattern_subsets() -> list[frozenset[ContentPattern]]:
    members = list(ContentPattern)
    return [
        frozenset(combo)
        for combo in chain.from_iterable(
            combinations(members, r) for r in range(len(members) + 1)
        )
    ]


def test_confidence_always_in_unit_interval() -> None:
    for r in range(1, 4):
        for combo in combinations(_FRAGMENTS, r):
            result = analyze_content("".join(combo) * r)
            assert 0.0 <= result.confidence <= 1.0


@pytest.mark.parametrize("language", [None, *Language])
@pytest.mark.parametrize("length", [0, 100, 101, 400])
def test_compute_confidence_clamped(
    language: Language | None, length: int
) -> None:
    for patterns in _pattern_subsets():
        score = compute_confidence("x" * length, language, patterns)
        assert 0.0 <= score <= 1.0


@pytest.mark.parametrize("text", _SAMPLES)
def test_patterns_drawn_from_vocabulary(text: str) -> None:
    result = analyze_content(text)
    assert result.patterns <= set(ContentPattern)
    assert len(set(result.suggested_diagram_types)) == len(
        result.suggested_diagram_types
    )


@pytest.mark.parametrize("text", _SAMPLES)
def test_detected_language_implies_code(text: str) -> None:
    language = detect_language(text)
    if language is not None:
        assert (
            classify_content_category(text, language)
            == ContentCategory.CODE
        )


@pytest.mark.parametrize(
    "text", [s for s in _SAMPLES if "->" not in s]
)
def test_actor_fallback_without_arrows(text: str) -> None:
    assert extract_actors(text) == list(FALLBACK_ACTORS)

"""Pull structural tokens out of unstructured text.

Every extractor is pure and tolerant of missing structure: when nothing
matches it returns a fixed fallback so the renderers always have
something to lay out. ``extract_classes`` is the exception; it may
return an empty list.
"""

from __future__ import annotations

from notediagram.analysis.catalog import (
    ARROW_TOKEN,
    CLASS_DECLARATIONS,
    COMPONENT_SUFFIXES,
    LAYER_KEYWORDS,
    MAIN_CLASS_DECLARATION,
)
from notediagram.constants import (
    FALLBACK_ACTORS,
    FALLBACK_CLASS_NAME,
    FALLBACK_COMPONENTS,
    FALLBACK_INTERACTIONS,
    FALLBACK_LAYERS,
    FALLBACK_STEPS,
    INTERACTION_LABEL_CHARS,
    INTERACTION_PLACEHOLDER,
    MAX_ACTORS,
    MAX_COMPONENTS,
    MAX_INTERACTIONS,
    MAX_LAYERS,
    MAX_STEPS,
    STEP_LABEL_CHARS,
)


def _unique(items: list[str]) -> list[str]:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(items))


def extract_classes(text: str) -> list[str]:
    """Names declared with ``class``, ``struct`` or ``interface``."""
    names: list[str] = []
    for pattern in CLASS_DECLARATIONS:
        names.extend(m.group(1) for m in pattern.finditer(text))
    return _unique(names)


def extract_main_class_name(text: str) -> str:
    """First declared class name, or ``"System"`` when there is none."""
    match = MAIN_CLASS_DECLARATION.search(text)
    return match.group(1) if match else FALLBACK_CLASS_NAME


def extract_actors(text: str) -> list[str]:
    """Participants named on either side of ``->`` arrows.

    ``A -> B: message`` contributes ``A`` and ``B``; at most four
    distinct names are kept.
    """
    actors: list[str] = []
    for line in text.splitlines():
        if ARROW_TOKEN not in line:
            continue
        parts = line.split(ARROW_TOKEN)
        source = parts[0].strip()
        target = parts[1].split(":", 1)[0].strip()
        actors.extend(name for name in (source, target) if name)

    if not actors:
        return list(FALLBACK_ACTORS)
    return _unique(actors)[:MAX_ACTORS]


def extract_interactions(text: str) -> list[str]:
    """Message labels: the text after the last colon on arrow/colon lines."""
    interactions: list[str] = []
    for line in text.splitlines():
        if ARROW_TOKEN not in line and ":" not in line:
            continue
        if ":" in line:
            label = line.rsplit(":", 1)[1].strip()
        else:
            label = INTERACTION_PLACEHOLDER
        interactions.append(label[:INTERACTION_LABEL_CHARS])
        if len(interactions) == MAX_INTERACTIONS:
            break

    return interactions or list(FALLBACK_INTERACTIONS)


def extract_steps(text: str) -> list[str]:
    """Bulleted, numbered or "step" lines, in document order."""
    steps: list[str] = []
    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue
        if (
            trimmed.startswith("-")
            or "." in trimmed
            or "step" in trimmed.lower()
        ):
            steps.append(trimmed[:STEP_LABEL_CHARS])
            if len(steps) == MAX_STEPS:
                break

    return steps or list(FALLBACK_STEPS)


def extract_components(text: str) -> list[str]:
    """Identifiers ending in Service, Component, Manager or Controller."""
    components: list[str] = []
    for pattern in COMPONENT_SUFFIXES:
        components.extend(m.group(0) for m in pattern.finditer(text))

    if not components:
        return list(FALLBACK_COMPONENTS)
    return _unique(components)[:MAX_COMPONENTS]


def extract_layers(text: str) -> list[str]:
    """Layers named in the text, else Presentation, Business and Data."""
    lowered = text.lower()
    layers = [
        f"{keyword.capitalize()} Layer"
        for keyword in LAYER_KEYWORDS
        if keyword in lowered
    ]
    return layers[:MAX_LAYERS] or list(FALLBACK_LAYERS)

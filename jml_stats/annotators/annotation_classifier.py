"""
Annotation Classifier - decides the AnnotationType of a JML entity

Classification is plain substring matching on the annotation text with the
opening marker removed. Rules are tried in order and the first match wins,
so an `assert` that mentions `requires ` is still an assert.

Known over-approximation: `\\by` is searched in the whole text, so an assert
whose comment mentions `\\by` is reported as ASSERT_SCRIPT.
"""

from __future__ import annotations

from typing import Callable

from ..constants import ExtractionDefaults, JmlMarkers
from ..models.annotation import AnnotationType


def _starts_with(prefix: str) -> Callable[[str], bool]:
    return lambda text: text.startswith(prefix)


def _contains(*needles: str) -> Callable[[str], bool]:
    return lambda text: any(needle in text for needle in needles)


# Ordered rules after the assert check; first match wins.
CLASSIFICATION_RULES: list[tuple[Callable[[str], bool], AnnotationType]] = [
    (_starts_with('set '), AnnotationType.SET_STATEMENT),
    (_starts_with('loop_invariant'), AnnotationType.LOOP_INV),
    (_contains('requires '), AnnotationType.CONTRACT),
    (_contains('model '), AnnotationType.MODEL_METHOD),
    (_contains('ghost '), AnnotationType.GHOST_DECL),
    (_contains('pure', 'non_null', 'nullable'), AnnotationType.ANNOTATION),
]


def strip_marker(content: str) -> str:
    """Annotation text without its opening marker and surrounding whitespace."""
    return content[JmlMarkers.MARKER_WIDTH:].strip()


def classify_annotation(content: str) -> AnnotationType:
    """Determine the type of a JML entity from its text.

    Args:
        content: Annotation text including the opening `/*@` or `//@`

    Returns:
        The first matching AnnotationType, UNKNOWN if no rule applies
    """
    text = strip_marker(content)

    if text.startswith('assert'):
        if ExtractionDefaults.SCRIPT_MARKER in text:
            return AnnotationType.ASSERT_SCRIPT
        return AnnotationType.ASSERT

    for matches, annotation_type in CLASSIFICATION_RULES:
        if matches(text):
            return annotation_type

    return AnnotationType.UNKNOWN

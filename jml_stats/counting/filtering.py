"""
Annotation filtering

Removes lines that carry no content from JML annotations: blank lines,
lines holding only the '@' continuation marker, plain (non-JML) `//`
comments and `@ //` comment continuations.
"""

from __future__ import annotations

from typing import Iterable, List

from ..constants import JmlMarkers
from ..models.annotation import FilteredAnnotation, RawAnnotation


def is_content_line(line: str) -> bool:
    """Check whether a line of annotation text survives filtering."""
    stripped = line.strip()
    if not stripped:
        return False
    if stripped == JmlMarkers.CONTINUATION:
        return False
    if stripped.startswith(JmlMarkers.COMMENT) and not stripped.startswith(JmlMarkers.LINE_START):
        return False
    if stripped.startswith(f"{JmlMarkers.CONTINUATION} {JmlMarkers.COMMENT}"):
        return False
    return True


def filter_content(content: str) -> str:
    """Drop non-content lines, keeping the order of the rest."""
    return '\n'.join(line for line in content.splitlines() if is_content_line(line))


def filter_annotation(annotation: RawAnnotation) -> FilteredAnnotation:
    """Filter one annotation; signature and type are carried over."""
    return FilteredAnnotation(
        method_signature=annotation.method_signature,
        content=filter_content(annotation.content),
        type=annotation.type,
        raw_content=annotation.content,
    )


def filter_annotations(annotations: Iterable[RawAnnotation]) -> List[FilteredAnnotation]:
    return [filter_annotation(a) for a in annotations]

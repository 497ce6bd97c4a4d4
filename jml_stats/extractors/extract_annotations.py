"""
JML Annotation Extraction

Single left-to-right scan over Java source text that at the same time
- tracks the brace depth to notice when a method body is entered and
  remembers that method's signature, and
- cuts out every `/*@ ... */` and `//@ ...` annotation, tagged with the
  signature in effect at its position and its AnnotationType.

This is not a Java parser. Method bodies are braces opened at depth 2
(one level inside a type body) and the signature is found by walking back
to the nearest '(' and from there to the nearest space, so the scanner
relies on conventional declaration layout.
"""

from __future__ import annotations

import re
import sys
from typing import List

from ..annotators.annotation_classifier import classify_annotation
from ..config import CounterConfig
from ..constants import ExtractionDefaults, JmlMarkers
from ..errors import MalformedInputError
from ..models.annotation import RawAnnotation

DEBUG = CounterConfig.DEBUG

_WHITESPACE_RUN = re.compile(r'\s+')


def find_block_end(text: str, start: int) -> int:
    """Index just past the `*/` closing the block annotation at `start`.

    Annotations do not nest; the first end marker closes the span.

    Raises:
        MalformedInputError: if the input ends before an end marker
    """
    end = text.find(JmlMarkers.BLOCK_END, start + len(JmlMarkers.BLOCK_START))
    if end == -1:
        raise MalformedInputError(start, "unterminated JML block annotation")
    return end + len(JmlMarkers.BLOCK_END)


def find_line_end(text: str, start: int) -> int:
    """Index of the line terminator ending the line annotation at `start`.

    A trailing '\\r' belongs to the terminator. Without a terminator the
    annotation runs to the end of the input.
    """
    end = text.find('\n', start)
    if end == -1:
        return len(text)
    if end > start and text[end - 1] == '\r':
        return end - 1
    return end


def _scan_back(text: str, index: int, target: str, what: str, brace_index: int) -> int:
    while index >= 0:
        if text[index] == target:
            return index
        index -= 1
    raise MalformedInputError(brace_index, f"no {what} before method body")


def extract_method_signature(text: str, brace_index: int) -> str:
    """Signature of the method whose body opens at `brace_index`.

    Walks back to the nearest '(' and from there to the nearest space.
    The name sits between that space and the '('; the parameter list runs
    from the '(' up to the brace, with whitespace runs collapsed.

    Example:
        'static void sort(int[] values) {'  ->  'sort(int[] values)'

    Raises:
        MalformedInputError: if either walk runs past the start of the input
    """
    paren = _scan_back(text, brace_index, '(', "'('", brace_index)
    space = _scan_back(text, paren, ' ', "space before method name", brace_index)

    name = text[space:paren].strip()
    parameters = _WHITESPACE_RUN.sub(' ', text[paren:brace_index].strip())
    return name + parameters


def extract_annotations(text: str) -> List[RawAnnotation]:
    """
    Extract all JML annotations from Java source text

    Every index of the input is visited, including those inside an
    annotation that was already cut out; braces in annotations therefore
    count towards the depth just like braces in code.

    Args:
        text: Full content of one Java source file

    Returns:
        RawAnnotations in order of their start position

    Raises:
        MalformedInputError: for an unterminated block annotation or a
            method body without a recognizable signature before it
    """
    annotations: List[RawAnnotation] = []

    signature = ''
    depth = 0

    for i in range(len(text)):
        if text.startswith(JmlMarkers.BLOCK_START, i):
            end = find_block_end(text, i)
            annotations.append(_make_annotation(text[i:end], signature, i))

        elif text.startswith(JmlMarkers.LINE_START, i):
            end = find_line_end(text, i)
            annotations.append(_make_annotation(text[i:end], signature, i))

        elif text[i] == '{':
            depth += 1
            if depth == ExtractionDefaults.METHOD_BODY_DEPTH:
                signature = extract_method_signature(text, i)
                if DEBUG:
                    print(f"DEBUG: entering method {signature}", file=sys.stderr)

        elif text[i] == '}':
            depth -= 1

    if DEBUG:
        print(f"DEBUG: extracted {len(annotations)} annotations", file=sys.stderr)

    return annotations


def _make_annotation(content: str, signature: str, offset: int) -> RawAnnotation:
    return RawAnnotation(
        method_signature=signature,
        content=content,
        type=classify_annotation(content),
        offset=offset,
    )

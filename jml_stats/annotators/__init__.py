"""
Annotators module for classifying JML annotations.
"""

from .annotation_classifier import classify_annotation, strip_marker

__all__ = ['classify_annotation', 'strip_marker']

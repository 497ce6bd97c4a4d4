"""
Extractors module: cuts JML annotations out of Java source text.
"""

from .extract_annotations import (
    extract_annotations,
    extract_method_signature,
    find_block_end,
    find_line_end,
)

__all__ = [
    'extract_annotations',
    'extract_method_signature',
    'find_block_end',
    'find_line_end',
]

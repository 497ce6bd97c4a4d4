"""
Reporting: statistics table and per-annotation dump files.
"""

from .table import format_table, write_table
from .dumps import to_valid_file_name, write_annotation_dumps

__all__ = [
    'format_table',
    'write_table',
    'to_valid_file_name',
    'write_annotation_dumps',
]

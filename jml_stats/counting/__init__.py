"""
Counting stages: filtering, command counting and per-group aggregation.
"""

from .filtering import filter_annotation, filter_annotations, filter_content
from .commands import count_commands, count_script_commands
from .aggregation import accumulate, aggregate_by_group, combine, group_stats

__all__ = [
    'filter_annotation',
    'filter_annotations',
    'filter_content',
    'count_commands',
    'count_script_commands',
    'accumulate',
    'aggregate_by_group',
    'combine',
    'group_stats',
]

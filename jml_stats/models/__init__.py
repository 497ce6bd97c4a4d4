"""
Pydantic Models for the JML statistics pipeline

Models:
- RawAnnotation: JML entity as cut out of the source text
- FilteredAnnotation: JML entity with blank and comment lines removed
- CommandStat: Script command counts of one annotation or of a group
- StatsReport: Complete result of one run
"""

from .annotation import (
    AnnotationType,
    RawAnnotation,
    FilteredAnnotation,
)

from .command_stat import CommandStat

from .stats_report import StatsReport

__all__ = [
    # annotation
    'AnnotationType',
    'RawAnnotation',
    'FilteredAnnotation',

    # command_stat
    'CommandStat',

    # stats_report
    'StatsReport',
]

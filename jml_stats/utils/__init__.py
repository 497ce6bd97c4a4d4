"""
Utility modules for the jml_stats package.

Provides per-stage timing collection.
"""

from .timing import StageTiming, Timer

__all__ = ['StageTiming', 'Timer']

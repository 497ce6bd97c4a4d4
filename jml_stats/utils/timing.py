"""
Timing utilities for the pipeline stages.

Durations are collected per stage and printed when JML_STATS_DEBUG=1 is set.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class StageTiming:
    """Durations of the pipeline stages, in the order they first ran.

    Attributes:
        durations_ms: Stage name -> cumulative time in milliseconds
    """

    durations_ms: dict[str, float] = field(default_factory=dict)

    def record(self, stage: str, duration_ms: float) -> None:
        """Add a measurement to a stage."""
        self.durations_ms[stage] = self.durations_ms.get(stage, 0.0) + duration_ms

    @property
    def total_ms(self) -> float:
        return sum(self.durations_ms.values())

    def stage(self, name: str) -> Timer:
        """Timer that records into this collection under `name`."""
        return Timer(self, name)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'stages': {name: round(ms, 2) for name, ms in self.durations_ms.items()},
            'total_ms': round(self.total_ms, 2),
        }


class Timer:
    """Context manager timing one stage.

    Usage:
        timings = StageTiming()
        with timings.stage('extract'):
            annotations = extract_annotations(text)

        # Or standalone:
        with Timer() as t:
            ...
        print(f"Took {t.elapsed_ms}ms")
    """

    def __init__(self, timings: StageTiming | None = None, stage: str = '') -> None:
        self._timings = timings
        self._stage = stage
        self._start_time: float = 0.0
        self._elapsed_ms: float = 0.0

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed_ms

    def __enter__(self) -> Timer:
        self._start_time = time.perf_counter()
        return self

    def __exit__(self, *args) -> None:
        self._elapsed_ms = (time.perf_counter() - self._start_time) * 1000
        if self._timings is not None:
            self._timings.record(self._stage, self._elapsed_ms)

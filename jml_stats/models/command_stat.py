"""
CommandStat Model - Number of each script command in a JML entity

A per-annotation stat references the annotation it was counted from; an
aggregated stat (sum over several annotations) has no annotation.
"""

from typing import Dict, Iterable, Optional
from pydantic import BaseModel, Field, computed_field, field_validator

from .annotation import FilteredAnnotation


class CommandStat(BaseModel):
    """Command counts of one annotation, or of a group of annotations"""
    annotation: Optional[FilteredAnnotation] = Field(
        None,
        description="Counted annotation; None for aggregated stats"
    )
    counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Command -> number of lines starting with it"
    )

    model_config = {
        'frozen': True,
    }

    @field_validator('counts')
    @classmethod
    def validate_counts(cls, v):
        """Counts can never be negative"""
        for command, count in v.items():
            if count < 0:
                raise ValueError(f"count for '{command}' must be >= 0, got {count}")
        return v

    @classmethod
    def zero(cls, vocabulary: Iterable[str]) -> 'CommandStat':
        """All-zero aggregated stat; identity for summing stats."""
        return cls(annotation=None, counts={command: 0 for command in vocabulary})

    @property
    def is_aggregate(self) -> bool:
        return self.annotation is None

    @computed_field
    @property
    def total(self) -> int:
        """Sum over all commands"""
        return sum(self.counts.values())

    def count(self, command: str) -> int:
        """Count for a command, 0 if it was never seen."""
        return self.counts.get(command, 0)

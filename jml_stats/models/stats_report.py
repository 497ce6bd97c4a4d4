"""
StatsReport Model - Result of one statistics run

Ties together what a run produced: the per-group aggregated stats, the
formatted table, annotation totals and the files written.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, computed_field

from .command_stat import CommandStat


class StatsReport(BaseModel):
    """Everything a single run of the pipeline produced"""

    source_path: str = Field(..., description="Java file the annotations were read from")
    groups: Dict[str, CommandStat] = Field(
        default_factory=dict,
        description="Method group prefix -> aggregated stat, in group order"
    )
    table: str = Field(..., description="Delimited statistics table")

    annotation_count: int = Field(0, ge=0, description="Annotations extracted")
    annotations_by_type: Dict[str, int] = Field(
        default_factory=dict,
        description="Count of annotations per AnnotationType"
    )
    script_count: int = Field(0, ge=0, description="ASSERT_SCRIPT annotations counted")

    table_path: Optional[str] = Field(None, description="Where the table was written")
    dump_paths: List[str] = Field(default_factory=list, description="Written annotation dumps")

    model_config = {
        'frozen': True,
    }

    @computed_field
    @property
    def total_commands(self) -> int:
        """Commands counted across all groups"""
        return sum(stat.total for stat in self.groups.values())

    def to_summary_dict(self) -> Dict[str, Any]:
        """Export summary data for console output"""
        return {
            'source': self.source_path,
            'annotations': self.annotation_count,
            'annotations_by_type': dict(sorted(self.annotations_by_type.items())),
            'scripts': self.script_count,
            'groups': {name: stat.total for name, stat in self.groups.items()},
            'total_commands': self.total_commands,
            'table_file': self.table_path,
            'dump_files': len(self.dump_paths),
        }

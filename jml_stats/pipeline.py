#!/usr/bin/env python3
"""
JML Script Statistics Pipeline

Reads the Java source file below a project directory, extracts its JML
annotations and counts the proof-script commands of every
`assert ... \\by ...` annotation per method group.

Writes, below the project's output directory:
- stats.csv: the statistics table (also printed to stdout)
- jml/Sorter_<method>_<n>.txt: one file per counted annotation

Usage:
    jml-stats /path/to/project
    python -m jml_stats /path/to/project

Since no real parser is used, counting relies on simple string matching and
may be wrong in some cases. Sanity-check the results.
"""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from collections import Counter
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from .config import CounterConfig
from .constants import MethodGroups, ScriptCommands
from .counting.aggregation import accumulate, group_stats
from .counting.commands import count_script_commands
from .counting.filtering import filter_annotations
from .errors import ScriptStatsError, UsageError
from .extractors.extract_annotations import extract_annotations
from .models.annotation import FilteredAnnotation, RawAnnotation
from .models.command_stat import CommandStat
from .models.stats_report import StatsReport
from .reporting.dumps import write_annotation_dumps
from .reporting.table import format_table, write_table
from .utils.timing import StageTiming

DEBUG = CounterConfig.DEBUG


@dataclass
class Analysis:
    """Intermediate results of the in-memory stages."""
    annotations: List[RawAnnotation]
    filtered: List[FilteredAnnotation]
    stats: List[CommandStat]
    members: Dict[str, List[CommandStat]]
    grouped: Dict[str, CommandStat]
    table: str


class ScriptCounter:
    """Runs extraction, filtering, counting, aggregation and reporting.

    Usage:
        counter = ScriptCounter()
        report = counter.run('/path/to/project')
        print(report.table)
    """

    def __init__(
        self,
        vocabulary: Iterable[str] = ScriptCommands.VOCABULARY,
        groups: Sequence[str] = MethodGroups.PREFIXES,
        settings: type[CounterConfig] = CounterConfig,
        logger: Optional[Callable[[str], None]] = None,
    ):
        self.vocabulary = sorted(vocabulary)
        self.groups = list(groups)
        self.settings = settings
        self.logger = logger or partial(print, file=sys.stderr)
        self.timings = StageTiming()

    def analyze(self, text: str) -> Analysis:
        """Run the in-memory stages over one source text."""
        with self.timings.stage('extract'):
            annotations = extract_annotations(text)

        with self.timings.stage('filter'):
            filtered = filter_annotations(annotations)

        with self.timings.stage('count'):
            stats = count_script_commands(filtered, self.vocabulary)

        with self.timings.stage('aggregate'):
            members = group_stats(stats, self.groups)
            grouped = {
                prefix: accumulate(group, self.vocabulary)
                for prefix, group in members.items()
            }

        if DEBUG:
            for prefix, group in members.items():
                print(f"DEBUG: group {prefix!r}: {len(group)} scripts", file=sys.stderr)

        with self.timings.stage('format'):
            table = format_table(grouped, self.vocabulary, separator=self.settings.SEPARATOR)

        return Analysis(
            annotations=annotations,
            filtered=filtered,
            stats=stats,
            members=members,
            grouped=grouped,
            table=table,
        )

    def count(self, text: str, source_path: str = '') -> StatsReport:
        """Analyze source text without touching the file system."""
        return self._build_report(self.analyze(text), source_path)

    def run(self, project_dir) -> StatsReport:
        """
        Analyze the project's source file and write table and dumps

        Args:
            project_dir: Project root; input and output paths are relative to it

        Returns:
            StatsReport including the paths of all written files

        Raises:
            OSError: if the input cannot be read or an output cannot be written
            MalformedInputError: if the source text cannot be scanned
        """
        project_dir = Path(project_dir)
        source = project_dir / self.settings.INPUT_FILE
        output_dir = project_dir / self.settings.OUTPUT_DIR

        self.logger(f"Reading: {source}")
        with open(source, 'r', encoding='utf-8') as f:
            text = f.read()

        analysis = self.analyze(text)

        with self.timings.stage('write'):
            dump_paths: List[Path] = []
            for prefix, group in analysis.members.items():
                dump_paths.extend(write_annotation_dumps(
                    [stat.annotation for stat in group],
                    output_dir / self.settings.DUMP_SUBDIR,
                    prefix=self.settings.DUMP_PREFIX,
                ))
            table_path = write_table(analysis.table, output_dir / self.settings.TABLE_FILE)

        self.logger(f"Wrote {len(dump_paths)} annotation files and {table_path}")

        if DEBUG:
            print(f"DEBUG: timings {json.dumps(self.timings.to_dict())}", file=sys.stderr)

        report = self._build_report(analysis, str(source))
        return report.model_copy(update={
            'table_path': str(table_path),
            'dump_paths': [str(p) for p in dump_paths],
        })

    def _build_report(self, analysis: Analysis, source_path: str) -> StatsReport:
        by_type = Counter(a.type.value for a in analysis.annotations)
        return StatsReport(
            source_path=source_path,
            groups=analysis.grouped,
            table=analysis.table,
            annotation_count=len(analysis.annotations),
            annotations_by_type=dict(by_type),
            script_count=len(analysis.stats),
        )


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='jml-stats',
        description='Count proof-script commands in the JML annotations of a Java project',
    )
    parser.add_argument('project_dir', help='Project directory')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 2

    if DEBUG:
        CounterConfig.print_config()

    try:
        report = ScriptCounter().run(args.project_dir)
    except (ScriptStatsError, OSError) as e:
        print(f"Error in statistics pipeline: {e}", file=sys.stderr)
        if DEBUG:
            traceback.print_exc(file=sys.stderr)
        return 1

    print(report.table, end='')
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Script command counting

A line counts for a command if, after trimming and dropping one leading
'@', it starts with the command string. There is no word boundary check:
`assertfoo` counts as `assert`, and a line can count for several commands
if one command were a prefix of another.

Only the leading '@' is dropped, the line is not trimmed again afterwards,
so `@   auto;` does not count. Scripts that should be counted have to put
the command right after the '@'.
"""

from __future__ import annotations

from typing import Iterable, List

from ..constants import JmlMarkers
from ..models.annotation import FilteredAnnotation
from ..models.command_stat import CommandStat


def strip_continuation(line: str) -> str:
    """Trim a line and drop one leading '@' if present."""
    stripped = line.strip()
    if stripped.startswith(JmlMarkers.CONTINUATION):
        return stripped[len(JmlMarkers.CONTINUATION):]
    return stripped


def count_commands(annotation: FilteredAnnotation, vocabulary: Iterable[str]) -> CommandStat:
    """Count the script commands in one filtered annotation.

    Args:
        annotation: Filtered annotation to count
        vocabulary: Commands to look for

    Returns:
        CommandStat referencing the annotation, with a count (possibly 0)
        for every command of the vocabulary
    """
    commands = list(vocabulary)
    lines = [strip_continuation(line) for line in annotation.lines()]

    counts = {
        command: sum(1 for line in lines if line.startswith(command))
        for command in commands
    }
    return CommandStat(annotation=annotation, counts=counts)


def count_script_commands(
    annotations: Iterable[FilteredAnnotation],
    vocabulary: Iterable[str],
) -> List[CommandStat]:
    """Count commands of every ASSERT_SCRIPT annotation, in input order."""
    commands = list(vocabulary)
    return [count_commands(a, commands) for a in annotations if a.is_script]

"""
Statistics table formatting

Header: 'method name' followed by the commands in sorted order. One row per
method group, in group order, with that group's count for every command.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping

from ..constants import TableDefaults
from ..models.command_stat import CommandStat


def format_table(
    grouped: Mapping[str, CommandStat],
    vocabulary: Iterable[str],
    separator: str = TableDefaults.SEPARATOR,
    line_terminator: str = TableDefaults.LINE_TERMINATOR,
) -> str:
    """Format aggregated stats as a delimited table.

    Args:
        grouped: Group name -> aggregated stat; rows follow its order
        vocabulary: Commands, one column each (sorted)
        separator: Field delimiter
        line_terminator: Appended to every row, header included

    Returns:
        The table as a single string
    """
    commands = sorted(vocabulary)

    rows = [[TableDefaults.FIRST_COLUMN, *commands]]
    for name, stat in grouped.items():
        rows.append([name, *(str(stat.count(command)) for command in commands)])

    return ''.join(separator.join(row) + line_terminator for row in rows)


def write_table(table: str, path: Path) -> Path:
    """Replace `path` with the table text."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        os.remove(path)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(table)
    return path

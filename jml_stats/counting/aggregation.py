"""
Per-group aggregation of command statistics

Stats are grouped by the method group whose prefix their annotation's
signature starts with, then summed key by key. Summing starts from an
all-zero stat over the vocabulary, so an empty group still reports every
command.

Prefixes are not required to be disjoint: a stat matching two prefixes is
counted in both groups.
"""

from __future__ import annotations

from functools import reduce
from typing import Dict, Iterable, List, Sequence

from ..models.command_stat import CommandStat


def combine(first: CommandStat, second: CommandStat) -> CommandStat:
    """Key-wise sum of two stats as a new aggregated stat."""
    keys = first.counts.keys() | second.counts.keys()
    return CommandStat(
        annotation=None,
        counts={key: first.count(key) + second.count(key) for key in keys},
    )


def accumulate(stats: Iterable[CommandStat], vocabulary: Iterable[str]) -> CommandStat:
    """Sum any number of stats; empty input gives all zeros."""
    return reduce(combine, stats, CommandStat.zero(vocabulary))


def select_group(stats: Iterable[CommandStat], prefix: str) -> List[CommandStat]:
    """Per-annotation stats whose method signature starts with `prefix`."""
    return [
        stat for stat in stats
        if stat.annotation is not None and stat.annotation.method_signature.startswith(prefix)
    ]


def group_stats(
    stats: Sequence[CommandStat],
    groups: Iterable[str],
) -> Dict[str, List[CommandStat]]:
    """Group prefix -> member stats, in group order."""
    return {prefix: select_group(stats, prefix) for prefix in groups}


def aggregate_by_group(
    stats: Sequence[CommandStat],
    groups: Iterable[str],
    vocabulary: Iterable[str],
) -> Dict[str, CommandStat]:
    """Group prefix -> summed stat, in group order."""
    commands = list(vocabulary)
    return {
        prefix: accumulate(members, commands)
        for prefix, members in group_stats(stats, groups).items()
    }

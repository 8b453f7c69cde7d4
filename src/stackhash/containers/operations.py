"""Aggregations over stacks using strategy-keyed collections."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from stackhash.containers.mapping import StrategyDict, StrategySet
from stackhash.core.stack import is_absent_or_empty
from stackhash.core.strategy import EquivalenceStrategy, comparing_all_but_count


def count_by(
    stacks: Iterable[Any], strategy: EquivalenceStrategy | None = None
) -> StrategyDict[Any, int]:
    """Sum quantities of equivalent stacks.

    Args:
        stacks: Stacks to total. Absent and empty stacks are skipped.
        strategy: Grouping strategy. Defaults to comparing_all_but_count(),
            so stacks differing only in quantity are grouped together.

    Returns:
        Mapping from the first stack of each group to the group's total quantity.
    """
    totals: StrategyDict[Any, int] = StrategyDict(strategy or comparing_all_but_count())
    for stack in stacks:
        if is_absent_or_empty(stack):
            continue
        totals[stack] = totals.get(stack, 0) + stack.quantity
    return totals


def deduplicate(stacks: Iterable[Any], strategy: EquivalenceStrategy) -> list[Any]:
    """Keep the first stack of each equivalence class, in input order."""
    return list(StrategySet(strategy, stacks))

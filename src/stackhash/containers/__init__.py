"""Containers: dicts and sets that compare keys with an EquivalenceStrategy."""

from stackhash.containers.mapping import StrategyDict, StrategySet
from stackhash.containers.operations import count_by, deduplicate

__all__ = [
    "StrategyDict",
    "StrategySet",
    "count_by",
    "deduplicate",
]

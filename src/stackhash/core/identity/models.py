"""Kind identity models.

Usage:
    iron = Kind("minecraft:iron_ingot")
    iron is iron                      # reference identity, session-local
    iron.name == Kind("minecraft:iron_ingot").name  # durable across reloads
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class IdentityMode(Enum):
    """How two kinds are decided to be the same."""

    REFERENCE = auto()  # Same object in memory. Fast, lost on reload.
    STABLE_NAME = auto()  # Same registry name. Survives reloads.


@dataclass(frozen=True, slots=True, eq=False)
class Kind:
    """Session-local identity token for a stack's kind.

    Equality and hashing are by reference: two Kind objects with the same name
    are different kinds to REFERENCE comparison, but equal to STABLE_NAME
    comparison. That is what a reload looks like.
    """

    name: str | None = None

    def __repr__(self) -> str:
        return f"Kind({self.name!r})"

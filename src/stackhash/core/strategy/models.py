"""Strategy models: facets, facet sets, and errors.

A facet is one independently selectable dimension of comparison. A FacetSet is
the frozen selection a strategy is built from.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, fields
from enum import Enum
from itertools import product


class Facet(Enum):
    """Comparable dimensions of a stack. Values are FacetSet field names."""

    KIND = "kind"  # Reference identity of the kind
    STABLE_KIND_NAME = "stable_kind_name"  # Durable name of the kind
    QUANTITY = "quantity"
    VARIANT = "variant"
    PAYLOAD = "payload"


@dataclass(frozen=True, slots=True)
class FacetSet:
    """Which facets take part in equality and hashing.

    Every combination is legal, including none and all. ``kind`` and
    ``stable_kind_name`` are alternatives for the same concept; selecting both
    requires both to agree.
    """

    kind: bool = False
    stable_kind_name: bool = False
    quantity: bool = False
    variant: bool = False
    payload: bool = False

    @classmethod
    def of(cls, *facets: Facet) -> FacetSet:
        """Build a FacetSet selecting exactly ``facets``."""
        return cls(**{facet.value: True for facet in facets})

    @classmethod
    def all_combinations(cls) -> Iterator[FacetSet]:
        """Yield all 32 facet selections."""
        for flags in product((False, True), repeat=len(Facet)):
            yield cls(*flags)

    def selected(self) -> frozenset[Facet]:
        """Facets that are switched on."""
        return frozenset(facet for facet in Facet if getattr(self, facet.value))

    def __contains__(self, facet: Facet) -> bool:
        return bool(getattr(self, facet.value))

    @property
    def has_identity_conflict(self) -> bool:
        """True if both reference and stable-name identity are selected."""
        return self.kind and self.stable_kind_name

    def __repr__(self) -> str:
        on = [f.name for f in fields(self) if getattr(self, f.name)]
        return f"FacetSet({', '.join(on) or 'none'})"


class IdentityConflictError(ValueError):
    """Both identity facets selected while settings forbid it."""

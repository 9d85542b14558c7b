"""Functional dependency value type and its wire record.

``FunctionalDependency`` is the engine's internal value object (a frozen
dataclass, cheap to create by the million while enumerating F+).
``FDRecord`` is the pydantic model for the engine input contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


def _canonical(attributes: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted(set(attributes)))


class FDRecord(BaseModel):
    """One functional dependency as received from a parser or API client."""

    lhs: List[str] = Field(..., min_length=1, description="Determinant attributes")
    rhs: List[str] = Field(..., min_length=1, description="Dependent attributes")

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True)
class FunctionalDependency:
    """X -> Y with both sides de-duplicated and sorted.

    Two dependencies are equal iff their sorted sides are equal; the direction
    matters, so ``{a}->{b}`` differs from ``{b}->{a}``.
    """

    lhs: Tuple[str, ...]
    rhs: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "lhs", _canonical(self.lhs))
        object.__setattr__(self, "rhs", _canonical(self.rhs))

    @classmethod
    def from_record(cls, record: FDRecord) -> "FunctionalDependency":
        return cls(tuple(record.lhs), tuple(record.rhs))

    def to_record(self) -> FDRecord:
        return FDRecord(lhs=list(self.lhs), rhs=list(self.rhs))

    def attributes(self) -> Tuple[str, ...]:
        return _canonical(self.lhs + self.rhs)

    def is_trivial(self) -> bool:
        """True when the right-hand side is contained in the left-hand side."""
        return set(self.rhs).issubset(self.lhs)

    def decompose_rhs(self) -> List["FunctionalDependency"]:
        """Split into one dependency per right-hand-side attribute."""
        return [FunctionalDependency(self.lhs, (attr,)) for attr in self.rhs]

    def __str__(self) -> str:
        return "{" + ", ".join(self.lhs) + "}->{" + ", ".join(self.rhs) + "}"

"""Relational schema engine: one set of functional dependencies and everything derived from it.

A ``RelationalSchema`` is read-only after construction. Every query recomputes
from the stored dependencies; the exponential queries accept an optional
``AnalysisContext`` so a batch of queries can share one enumeration:

    >>> schema = RelationalSchema.from_records([{"lhs": ["a"], "rhs": ["b"]}])
    >>> context = schema.context()
    >>> schema.is_bcnf(context), schema.candidate_keys(context)
    (True, [('a',)])
"""

from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from FD2NF.engine import keys, normal_forms
from FD2NF.engine.closure import AttributeClosure, attribute_closure
from FD2NF.engine.context import AnalysisContext
from FD2NF.engine.minimal_cover import minimal_cover
from FD2NF.ir.models.analysis import NormalForm
from FD2NF.ir.models.dependency import FDRecord, FunctionalDependency


class RelationalSchema:
    """Functional dependencies over a single relation."""

    def __init__(self, dependencies: Iterable[FunctionalDependency]):
        self.functional_dependencies: Tuple[FunctionalDependency, ...] = tuple(dependencies)
        universe = set()
        for fd in self.functional_dependencies:
            universe.update(fd.lhs)
            universe.update(fd.rhs)
        self._attributes: Tuple[str, ...] = tuple(sorted(universe))

    @classmethod
    def from_records(cls, records: Iterable[Union[FDRecord, Mapping[str, Any]]]) -> "RelationalSchema":
        """Build from input records; plain dicts are validated as ``FDRecord``."""
        dependencies = []
        for record in records:
            if not isinstance(record, FDRecord):
                record = FDRecord.model_validate(record)
            dependencies.append(FunctionalDependency.from_record(record))
        return cls(dependencies)

    def __iter__(self) -> Iterator[FunctionalDependency]:
        return iter(self.functional_dependencies)

    def __len__(self) -> int:
        return len(self.functional_dependencies)

    def __repr__(self) -> str:
        return f"RelationalSchema({list(self.functional_dependencies)!r})"

    def __str__(self) -> str:
        return "{" + ", ".join(str(fd) for fd in self.functional_dependencies) + "}"

    def attributes(self) -> Tuple[str, ...]:
        """The attribute universe, sorted."""
        return self._attributes

    def context(self) -> AnalysisContext:
        """A fresh cache for one batch of queries against this schema."""
        return AnalysisContext(self)

    def _resolve(self, context: Optional[AnalysisContext]) -> AnalysisContext:
        if context is None:
            return AnalysisContext(self)
        if context.schema is not self:
            raise ValueError("AnalysisContext belongs to a different schema")
        return context

    # -- closures -----------------------------------------------------------

    def attribute_closure(self, attributes: Iterable[str]) -> FrozenSet[str]:
        return attribute_closure(self.functional_dependencies, attributes)

    def look_up_attribute_closure(
        self,
        attributes: Iterable[str],
        context: Optional[AnalysisContext] = None,
    ) -> FrozenSet[str]:
        """Closure of ``attributes`` as found among the all-subsets closures.

        Sets that are not a subset of the universe have no entry there, so the
        result is empty rather than an error.
        """
        if context is not None:
            return self._resolve(context).look_up(attributes)
        attributes = frozenset(attributes)
        if not attributes.issubset(self._attributes):
            return frozenset()
        return self.attribute_closure(attributes)

    def all_attribute_closures(self, context: Optional[AnalysisContext] = None) -> List[AttributeClosure]:
        return list(self._resolve(context).attribute_closures)

    def closure(self, context: Optional[AnalysisContext] = None) -> List[FunctionalDependency]:
        """F+, trivial members included."""
        return list(self._resolve(context).dependency_closure)

    # -- keys ---------------------------------------------------------------

    def minimize(self, key: Iterable[str]) -> List[str]:
        return keys.minimize(self, key)

    def can_minimize(self, key: Iterable[str]) -> bool:
        return keys.can_minimize(self, key)

    def minimize_with_cover(self, key: Iterable[str], cover: Iterable[str]) -> List[str]:
        return keys.minimize_with_cover(self, key, frozenset(cover))

    def is_super_key(self, attributes: Iterable[str]) -> bool:
        return self.look_up_attribute_closure(attributes) == frozenset(self._attributes)

    def candidate_keys(self, context: Optional[AnalysisContext] = None) -> List[Tuple[str, ...]]:
        return list(self._resolve(context).candidate_keys)

    def super_keys(self, context: Optional[AnalysisContext] = None) -> List[Tuple[str, ...]]:
        return list(self._resolve(context).super_keys)

    def prime_attributes(self, context: Optional[AnalysisContext] = None) -> FrozenSet[str]:
        return self._resolve(context).prime_attributes

    # -- normal forms -------------------------------------------------------

    def is_second_nf(self, context: Optional[AnalysisContext] = None) -> bool:
        return normal_forms.is_in_normal_form(NormalForm.SECOND, self._resolve(context))

    def is_third_nf(self, context: Optional[AnalysisContext] = None) -> bool:
        return normal_forms.is_in_normal_form(NormalForm.THIRD, self._resolve(context))

    def is_bcnf(self, context: Optional[AnalysisContext] = None) -> bool:
        return normal_forms.is_in_normal_form(NormalForm.BOYCE_CODD, self._resolve(context))

    def violates_2nf(self, fd: FunctionalDependency, context: Optional[AnalysisContext] = None) -> bool:
        return normal_forms.violates_2nf(fd, self._resolve(context))

    def violates_3nf(self, fd: FunctionalDependency, context: Optional[AnalysisContext] = None) -> bool:
        return normal_forms.violates_3nf(fd, self._resolve(context))

    def violates_bcnf(self, fd: FunctionalDependency, context: Optional[AnalysisContext] = None) -> bool:
        return normal_forms.violates_bcnf(fd, self._resolve(context))

    # -- cover and equivalence ---------------------------------------------

    def minimal_cover(self, context: Optional[AnalysisContext] = None) -> "RelationalSchema":
        return RelationalSchema(minimal_cover(self, self._resolve(context)))

    def equals(self, other: Any, context: Optional[AnalysisContext] = None) -> bool:
        """True when both schemas give the same closure for every attribute subset."""
        if not isinstance(other, RelationalSchema):
            return False

        mine = _canonical_order(self._resolve(context).attribute_closures)
        theirs = _canonical_order(other.all_attribute_closures())
        if len(mine) != len(theirs):
            return False

        for (my_subset, my_closure), (their_subset, their_closure) in zip(mine, theirs):
            if my_subset != their_subset:
                return False
            if sorted(my_closure) != sorted(their_closure):
                return False
        return True


def _canonical_order(closures: List[AttributeClosure]) -> List[AttributeClosure]:
    """Longest subsets first, then by subset text, both descending."""
    return sorted(closures, key=lambda item: (len(item[0]), ",".join(item[0])), reverse=True)

"""Per-query cache of the exponential structures derived from a schema."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, List, Set, Tuple

from FD2NF.engine.closure import AttributeClosure, all_attribute_closures, dependency_closure
from FD2NF.engine.keys import find_candidate_keys, find_super_keys
from FD2NF.ir.models.dependency import FunctionalDependency

if TYPE_CHECKING:
    from FD2NF.engine.schema import RelationalSchema


class AnalysisContext:
    """Everything one top-level query needs, each piece computed at most once.

    Build one per batch with ``schema.context()`` and pass it to every schema
    query. A context belongs to a single schema and is never shared between
    schemas.
    """

    def __init__(self, schema: RelationalSchema):
        self.schema = schema
        self.universe: FrozenSet[str] = frozenset(schema.attributes())

    @cached_property
    def attribute_closures(self) -> List[AttributeClosure]:
        return all_attribute_closures(self.schema.functional_dependencies, self.schema.attributes())

    @cached_property
    def closure_table(self) -> Dict[FrozenSet[str], FrozenSet[str]]:
        return {frozenset(subset): closure for subset, closure in self.attribute_closures}

    @cached_property
    def dependency_closure(self) -> List[FunctionalDependency]:
        return dependency_closure(self.attribute_closures)

    @cached_property
    def candidate_keys(self) -> List[Tuple[str, ...]]:
        return find_candidate_keys(self.schema, self.dependency_closure)

    @cached_property
    def candidate_key_sets(self) -> List[FrozenSet[str]]:
        return [frozenset(key) for key in self.candidate_keys]

    @cached_property
    def super_keys(self) -> List[Tuple[str, ...]]:
        return find_super_keys(self.attribute_closures, self.universe)

    @cached_property
    def super_key_sets(self) -> Set[FrozenSet[str]]:
        return {frozenset(key) for key in self.super_keys}

    @cached_property
    def prime_attributes(self) -> FrozenSet[str]:
        prime: Set[str] = set()
        for key in self.candidate_keys:
            prime.update(key)
        return frozenset(prime)

    def look_up(self, attributes: Iterable[str]) -> FrozenSet[str]:
        return self.closure_table.get(frozenset(attributes), frozenset())

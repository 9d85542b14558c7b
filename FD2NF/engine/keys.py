"""Key minimization and candidate-key search."""

from __future__ import annotations

from typing import TYPE_CHECKING, Collection, FrozenSet, Iterable, List, Sequence, Tuple

from FD2NF.ir.models.dependency import FunctionalDependency
from FD2NF.utils.logging import get_logger

if TYPE_CHECKING:
    from FD2NF.engine.schema import RelationalSchema

logger = get_logger(__name__)


def _without(key: Sequence[str], index: int) -> List[str]:
    return list(key[:index]) + list(key[index + 1:])


def _first_removable(schema: RelationalSchema, key: Sequence[str], target: FrozenSet[str]) -> int:
    """Index of the first attribute whose removal keeps the closure equal to ``target``, or -1."""
    for i in range(len(key)):
        if schema.look_up_attribute_closure(_without(key, i)) == target:
            return i
    return -1


def minimize(schema: RelationalSchema, key: Iterable[str]) -> List[str]:
    """Drop attributes from a super key while it still determines every attribute.

    The first removable attribute (in key order) goes, then the search restarts
    on the shorter key. The result is minimal, not necessarily the smallest key.
    """
    return minimize_with_cover(schema, key, frozenset(schema.attributes()))


def can_minimize(schema: RelationalSchema, key: Iterable[str]) -> bool:
    """True when removing some single attribute keeps the closure at the full universe."""
    return _first_removable(schema, list(key), frozenset(schema.attributes())) >= 0


def minimize_with_cover(
    schema: RelationalSchema,
    key: Iterable[str],
    cover: Collection[str],
) -> List[str]:
    """Like ``minimize`` but the closure that must be preserved is ``cover``."""
    key = list(key)
    target = frozenset(cover)
    index = _first_removable(schema, key, target)
    while index >= 0:
        key = _without(key, index)
        index = _first_removable(schema, key, target)
    return key


def find_candidate_keys(
    schema: RelationalSchema,
    fplus: Sequence[FunctionalDependency],
) -> List[Tuple[str, ...]]:
    """All candidate keys, discovered from one minimized key.

    For every known key K and every X -> Y in F+, ``X ∪ (K − Y)`` is a super key.
    When no known key is contained in it, its minimization is a new candidate
    key. The outer loop runs over the list as it grows, so keys found late are
    expanded too.
    """
    keys: List[Tuple[str, ...]] = [tuple(sorted(minimize(schema, schema.attributes())))]
    key_sets: List[FrozenSet[str]] = [frozenset(keys[0])]

    i = 0
    while i < len(keys):
        current = key_sets[i]
        for fd in fplus:
            potential = set(fd.lhs) | (current - set(fd.rhs))
            if any(known.issubset(potential) for known in key_sets):
                continue
            new_key = tuple(sorted(minimize(schema, sorted(potential))))
            keys.append(new_key)
            key_sets.append(frozenset(new_key))
        i += 1

    logger.debug(f"Found {len(keys)} candidate keys: {keys}")
    return keys


def find_super_keys(
    closures: Iterable[Tuple[Tuple[str, ...], FrozenSet[str]]],
    universe: Collection[str],
) -> List[Tuple[str, ...]]:
    """Every subset whose closure is the full universe, shortest first."""
    size = len(universe)
    super_keys = [subset for subset, closure in closures if len(closure) == size]
    return sorted(super_keys, key=lambda subset: (len(subset), subset))

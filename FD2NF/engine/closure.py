"""Attribute closure, all-subsets enumeration and F+ construction.

These are the exponential building blocks of the engine. ``all_attribute_closures``
produces 2^n entries and ``dependency_closure`` roughly 4^n, so callers that
issue several queries should go through an ``AnalysisContext`` which computes
each of them once.
"""

from typing import FrozenSet, Iterable, List, Sequence, Tuple

from FD2NF.ir.models.dependency import FunctionalDependency
from FD2NF.utils.logging import get_logger

logger = get_logger(__name__)

AttributeClosure = Tuple[Tuple[str, ...], FrozenSet[str]]


def power_set(items: Sequence[str]) -> List[Tuple[str, ...]]:
    """All subsets of ``items``.

    Order: subsets containing the first item come before those without it,
    recursively, so the full sequence is first and the empty tuple last.
    """
    result: List[Tuple[str, ...]] = [()]
    for item in reversed(items):
        result = [(item,) + subset for subset in result] + result
    return result


def attribute_closure(
    dependencies: Sequence[FunctionalDependency],
    attributes: Iterable[str],
) -> FrozenSet[str]:
    """Smallest superset of ``attributes`` closed under ``dependencies``.

    Loops over the dependencies until a full pass adds nothing; the closure only
    grows, so this takes at most one pass per attribute in the universe.
    """
    closure = set(attributes)
    previous_size = -1
    while len(closure) != previous_size:
        previous_size = len(closure)
        for fd in dependencies:
            if closure.issuperset(fd.lhs):
                closure.update(fd.rhs)
    return frozenset(closure)


def all_attribute_closures(
    dependencies: Sequence[FunctionalDependency],
    universe: Sequence[str],
) -> List[AttributeClosure]:
    """Closure of every subset of ``universe`` as ``(sorted subset, closure)`` pairs."""
    closures = [
        (tuple(sorted(subset)), attribute_closure(dependencies, subset))
        for subset in power_set(list(universe))
    ]
    logger.debug(f"Computed {len(closures)} attribute closures over {len(universe)} attributes")
    return closures


def dependency_closure(closures: Iterable[AttributeClosure]) -> List[FunctionalDependency]:
    """F+: ``X -> Y`` for every subset X and every non-empty Y within X+.

    Trivial members are included; consumers filter with ``is_trivial()``.
    Subsets are distinct and so are the right-hand sides generated for each
    subset, so no member appears twice.
    """
    fplus: List[FunctionalDependency] = []
    for subset, closure in closures:
        if not closure:
            continue
        for rhs in power_set(sorted(closure)):
            if rhs:
                fplus.append(FunctionalDependency(subset, rhs))
    logger.debug(f"Built F+ with {len(fplus)} dependencies")
    return fplus

"""Minimal cover: single-attribute right sides, reduced left sides, no redundant dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from FD2NF.engine.closure import attribute_closure
from FD2NF.engine.context import AnalysisContext
from FD2NF.engine.keys import minimize_with_cover
from FD2NF.ir.models.dependency import FunctionalDependency
from FD2NF.utils.logging import get_logger

if TYPE_CHECKING:
    from FD2NF.engine.schema import RelationalSchema

logger = get_logger(__name__)


def decompose_dependencies(dependencies: Sequence[FunctionalDependency]) -> List[FunctionalDependency]:
    """Split every right-hand side into single attributes, dropping the trivial pieces."""
    decomposed: List[FunctionalDependency] = []
    for fd in dependencies:
        decomposed.extend(piece for piece in fd.decompose_rhs() if not piece.is_trivial())
    return decomposed


def reduce_left_sides(
    schema: RelationalSchema,
    dependencies: Sequence[FunctionalDependency],
) -> List[FunctionalDependency]:
    """Remove extraneous determinant attributes.

    The closure held fixed is the one of the dependency's left side in the
    starting schema, so the reduced set stays equivalent to it.
    """
    reduced: List[FunctionalDependency] = []
    for fd in dependencies:
        cover = schema.look_up_attribute_closure(fd.lhs)
        new_lhs = minimize_with_cover(schema, fd.lhs, cover)
        reduced.append(FunctionalDependency(tuple(new_lhs), fd.rhs))
    return reduced


def _preserves_closures(dependencies: Sequence[FunctionalDependency], context: AnalysisContext) -> bool:
    """True when ``dependencies`` give every subset of the context's universe the same closure.

    The universe stays that of the starting schema, so dropping the only
    dependency that mentions an attribute does not change what is compared.
    """
    return all(
        attribute_closure(dependencies, subset) == closure
        for subset, closure in context.attribute_closures
    )


def eliminate_dependencies(
    schema: RelationalSchema,
    dependencies: Sequence[FunctionalDependency],
    context: Optional[AnalysisContext] = None,
) -> List[FunctionalDependency]:
    """Drop dependencies whose removal leaves the closures of ``schema`` unchanged.

    After each removal the scan starts again from the first dependency.
    """
    context = context or schema.context()
    remaining = list(dependencies)
    removed = True
    while removed:
        removed = False
        for i in range(len(remaining)):
            candidate = remaining[:i] + remaining[i + 1:]
            if _preserves_closures(candidate, context):
                logger.debug(f"Dropping redundant dependency {remaining[i]}")
                remaining = candidate
                removed = True
                break
    return remaining


def minimal_cover(
    schema: RelationalSchema,
    context: Optional[AnalysisContext] = None,
) -> List[FunctionalDependency]:
    """Dependencies of a minimal cover of ``schema``."""
    decomposed = decompose_dependencies(schema.functional_dependencies)
    reduced = reduce_left_sides(schema, decomposed)
    cover = eliminate_dependencies(schema, reduced, context)
    logger.debug(
        f"Minimal cover: {len(schema.functional_dependencies)} dependencies -> "
        f"{len(decomposed)} decomposed -> {len(cover)} after eliminating redundancy"
    )
    return cover

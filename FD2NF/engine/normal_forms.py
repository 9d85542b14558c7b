"""2NF, 3NF and BCNF decision procedures.

Each schema-level check scans F+ and stops at the first violating dependency.
The per-dependency predicates are also used on their own to flag which
members of F+ break a normal form.
"""

from typing import Optional

from FD2NF.engine.context import AnalysisContext
from FD2NF.ir.models.analysis import NormalForm
from FD2NF.ir.models.dependency import FunctionalDependency
from FD2NF.utils.logging import get_logger

logger = get_logger(__name__)


def _is_proper_subset_of_candidate_key(fd: FunctionalDependency, context: AnalysisContext) -> bool:
    lhs = frozenset(fd.lhs)
    return any(lhs < key for key in context.candidate_key_sets)


def _rhs_all_prime(fd: FunctionalDependency, context: AnalysisContext) -> bool:
    return context.prime_attributes.issuperset(fd.rhs)


def _lhs_is_super_key(fd: FunctionalDependency, context: AnalysisContext) -> bool:
    return frozenset(fd.lhs) in context.super_key_sets


def violates_2nf(fd: FunctionalDependency, context: AnalysisContext) -> bool:
    """Partial dependency of a non-prime attribute on part of a candidate key."""
    if fd.is_trivial():
        return False
    if not _is_proper_subset_of_candidate_key(fd, context):
        return False
    return not _rhs_all_prime(fd, context)


def violates_3nf(fd: FunctionalDependency, context: AnalysisContext) -> bool:
    """Determinant is not a super key and some dependent attribute is not prime."""
    if fd.is_trivial():
        return False
    if _lhs_is_super_key(fd, context):
        return False
    return not _rhs_all_prime(fd, context)


def violates_bcnf(fd: FunctionalDependency, context: AnalysisContext) -> bool:
    """Determinant is not a super key."""
    if fd.is_trivial():
        return False
    return not _lhs_is_super_key(fd, context)


_PREDICATES = {
    NormalForm.SECOND: violates_2nf,
    NormalForm.THIRD: violates_3nf,
    NormalForm.BOYCE_CODD: violates_bcnf,
}


def is_in_normal_form(normal_form: NormalForm, context: AnalysisContext) -> bool:
    violates = _PREDICATES[normal_form]
    for fd in context.dependency_closure:
        if violates(fd, context):
            logger.debug(f"{fd} violates {normal_form.value}")
            return False
    return True


def weakest_violated_form(context: AnalysisContext) -> Optional[NormalForm]:
    """The lowest normal form the schema fails, or None when it is in BCNF."""
    for normal_form in (NormalForm.SECOND, NormalForm.THIRD, NormalForm.BOYCE_CODD):
        if not is_in_normal_form(normal_form, context):
            return normal_form
    return None


def highlighted_violation(
    fd: FunctionalDependency,
    context: AnalysisContext,
    failed: Optional[NormalForm],
) -> Optional[NormalForm]:
    """Which normal form to flag ``fd`` against.

    Dependencies are checked against the weakest form the schema fails, and
    against BCNF when the schema passes 3NF.
    """
    normal_form = failed or NormalForm.BOYCE_CODD
    if _PREDICATES[normal_form](fd, context):
        return normal_form
    return None

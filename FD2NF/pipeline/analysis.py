"""One query batch: every closure, key and normal-form result for a schema.

The batch builds a single ``AnalysisContext`` so the power-set enumeration and
F+ are computed once and shared by every check.
"""

from typing import Any, Iterable, Mapping, Optional, Union

from FD2NF.engine import AnalysisContext, RelationalSchema
from FD2NF.engine.normal_forms import highlighted_violation, weakest_violated_form
from FD2NF.ir.models.analysis import (
    AttributeClosureItem,
    DependencyClosureItem,
    MinimalCoverItem,
    NormalForm,
    SchemaAnalysis,
)
from FD2NF.ir.models.dependency import FDRecord
from FD2NF.utils.error_handling import ErrorContext, handle_analysis_error
from FD2NF.utils.logging import get_logger

logger = get_logger(__name__)


def _display_key(item):
    subset = item[0]
    return (len(subset), ",".join(subset))


def analyze_schema(schema: RelationalSchema, context: Optional[AnalysisContext] = None) -> SchemaAnalysis:
    """Run every query against ``schema`` and collect the results."""
    context = context or schema.context()
    universe_size = len(context.universe)
    logger.info(
        f"Analyzing schema with {len(schema)} dependencies over {universe_size} attributes"
    )

    attribute_closures = []
    for subset, closure in sorted(context.attribute_closures, key=_display_key):
        super_key = len(closure) == universe_size
        attribute_closures.append(
            AttributeClosureItem(
                subset=list(subset),
                closure=sorted(closure),
                super_key=super_key,
                candidate_key=super_key and not schema.can_minimize(subset),
            )
        )

    # Each form implies the weaker ones, so the first failure decides all three
    failed = weakest_violated_form(context)
    second_nf = failed is not NormalForm.SECOND
    third_nf = second_nf and failed is not NormalForm.THIRD
    bcnf = failed is None

    dependency_closure = [
        DependencyClosureItem(
            lhs=list(fd.lhs),
            rhs=list(fd.rhs),
            trivial=fd.is_trivial(),
            violation=highlighted_violation(fd, context, failed),
        )
        for fd in context.dependency_closure
    ]

    cover = schema.minimal_cover(context)

    analysis = SchemaAnalysis(
        attribute_closures=attribute_closures,
        dependency_closure=dependency_closure,
        is_second_nf=second_nf,
        is_third_nf=third_nf,
        is_bcnf=bcnf,
        candidate_keys=[list(key) for key in schema.candidate_keys(context)],
        prime_attributes=sorted(schema.prime_attributes(context)),
        minimal_cover=[MinimalCoverItem(lhs=list(fd.lhs), rhs=list(fd.rhs)) for fd in cover],
    )

    logger.info(
        f"Analysis complete: |F+|={len(dependency_closure)}, "
        f"{len(analysis.candidate_keys)} candidate keys, "
        f"2NF={second_nf} 3NF={third_nf} BCNF={bcnf}, "
        f"minimal cover has {len(analysis.minimal_cover)} dependencies"
    )
    return analysis


def analyze_records(records: Iterable[Union[FDRecord, Mapping[str, Any]]]) -> SchemaAnalysis:
    """Convenience wrapper: build the schema from input records and analyze it.

    Raises:
        AnalysisError: wrapping whatever failed, for example an invalid record
    """
    records = list(records)
    context = ErrorContext(operation="analyze_records", dependency_count=len(records))
    try:
        return analyze_schema(RelationalSchema.from_records(records))
    except Exception as e:
        # Re-raise to keep error propagation for library callers
        handle_analysis_error(e, context, reraise=True)

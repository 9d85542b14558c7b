"""Relational-schema algebra engine.

Closures, F+, candidate keys, normal-form decisions and minimal covers over a
single set of functional dependencies.
"""

from .closure import power_set, attribute_closure, all_attribute_closures, dependency_closure
from .context import AnalysisContext
from .schema import RelationalSchema

__all__ = [
    "power_set",
    "attribute_closure",
    "all_attribute_closures",
    "dependency_closure",
    "AnalysisContext",
    "RelationalSchema",
]

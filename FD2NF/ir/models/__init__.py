"""IR (Intermediate Representation) models."""

from .dependency import FDRecord, FunctionalDependency
from .analysis import (
    NormalForm,
    AttributeClosureItem,
    DependencyClosureItem,
    MinimalCoverItem,
    SchemaAnalysis,
    ErrorInfo,
    WorkerResponse,
)

__all__ = [
    "FDRecord",
    "FunctionalDependency",
    "NormalForm",
    "AttributeClosureItem",
    "DependencyClosureItem",
    "MinimalCoverItem",
    "SchemaAnalysis",
    "ErrorInfo",
    "WorkerResponse",
]

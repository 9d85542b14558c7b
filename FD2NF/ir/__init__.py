"""Intermediate Representation (IR) models for dependencies and analysis results."""

from .models import (
    FDRecord,
    FunctionalDependency,
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

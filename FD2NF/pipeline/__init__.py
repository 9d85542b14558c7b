"""Query batches and the worker boundary around the engine."""

from .analysis import analyze_schema, analyze_records
from .worker import AnalysisWorker, AnalysisInFlightError, check_attribute_limit, handle_request

__all__ = [
    "analyze_schema",
    "analyze_records",
    "AnalysisWorker",
    "AnalysisInFlightError",
    "check_attribute_limit",
    "handle_request",
]

"""Standardized error handling utilities.

Provides consistent error handling patterns for the analysis pipeline.
"""

from .handlers import (
    handle_analysis_error,
    AnalysisError,
    AttributeLimitExceeded,
    ErrorContext,
    log_error_with_context,
    create_error_response,
)

__all__ = [
    "handle_analysis_error",
    "AnalysisError",
    "AttributeLimitExceeded",
    "ErrorContext",
    "log_error_with_context",
    "create_error_response",
]

"""Standardized error handling for FD2NF analysis requests.

Provides consistent error handling, logging, and failure response creation.
Failure responses follow the worker protocol: ``{"successful": False, "message": ...}``.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, field

from FD2NF.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ErrorContext:
    """Context information for error handling."""
    operation: str
    attribute_count: Optional[int] = None
    dependency_count: Optional[int] = None
    additional_context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class AnalysisError(Exception):
    """Standardized error for analysis failures."""
    message: str
    context: ErrorContext
    original_exception: Optional[Exception] = None
    error_type: str = "analysis_error"

    def __str__(self) -> str:
        return f"[{self.context.operation}] {self.message}"


class AttributeLimitExceeded(Exception):
    """Raised by callers that refuse to analyze an attribute universe this large."""

    def __init__(self, attribute_count: int, max_attributes: int):
        self.attribute_count = attribute_count
        self.max_attributes = max_attributes
        super().__init__(
            f"Schema has {attribute_count} attributes; at most {max_attributes} can be analyzed"
        )


def log_error_with_context(
    error: Exception,
    context: ErrorContext,
    level: str = "error"
) -> None:
    """
    Log error with full context information.

    Args:
        error: The exception that occurred
        context: Error context information
        level: Log level ("error", "warning", "critical")
    """
    log_msg_parts = [f"Error in {context.operation}"]

    if context.attribute_count is not None:
        log_msg_parts.append(f"Attributes: {context.attribute_count}")
    if context.dependency_count is not None:
        log_msg_parts.append(f"Dependencies: {context.dependency_count}")

    log_msg = " | ".join(log_msg_parts)

    if level == "critical":
        logger.critical(f"{log_msg}: {error}", exc_info=True)
    elif level == "warning":
        logger.warning(f"{log_msg}: {error}")
    else:
        logger.error(f"{log_msg}: {error}", exc_info=True)

    if context.additional_context:
        logger.debug(f"Additional context: {context.additional_context}")


def create_error_response(
    error: Exception,
    context: ErrorContext,
) -> Dict[str, Any]:
    """
    Create a failure response in the worker protocol shape.

    Args:
        error: The exception that occurred
        context: Error context information

    Returns:
        Dictionary with ``successful=False``, the error message and structured details
    """
    error_details: Dict[str, Any] = {
        "type": type(error).__name__,
        "operation": context.operation,
    }

    # Parser errors carry a typed detail (kind/position); surface it for clients
    detail = getattr(error, "detail", None)
    if detail is not None:
        kind = getattr(detail, "kind", None)
        error_details["kind"] = getattr(kind, "value", kind)
        error_details["position"] = getattr(detail, "position", None)

    return {
        "successful": False,
        "message": str(error),
        "error": error_details,
    }


def handle_analysis_error(
    error: Exception,
    context: ErrorContext,
    log_level: str = "error",
    reraise: bool = False
) -> Optional[Dict[str, Any]]:
    """
    Handle an analysis error with standardized logging and response creation.

    Args:
        error: The exception that occurred
        context: Error context information
        log_level: Log level ("error", "warning", "critical")
        reraise: If True, re-raise the exception wrapped in AnalysisError

    Returns:
        Failure response dictionary

    Raises:
        AnalysisError: If reraise=True, wraps original error in AnalysisError
    """
    log_error_with_context(error, context, level=log_level)

    error_response = create_error_response(error, context)

    if reraise:
        analysis_error = AnalysisError(
            message=str(error),
            context=context,
            original_exception=error,
            error_type=type(error).__name__
        )
        raise analysis_error from error

    return error_response

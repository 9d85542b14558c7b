"""Failure responses built by the error handling helpers."""

import pytest

from FD2NF.ir.models.analysis import WorkerResponse
from FD2NF.parsing import FDParseError, parse_records
from FD2NF.utils.error_handling import (
    AnalysisError,
    AttributeLimitExceeded,
    ErrorContext,
    create_error_response,
    handle_analysis_error,
)


def _parse_error() -> FDParseError:
    with pytest.raises(FDParseError) as exc_info:
        parse_records("{a,}->{b}")
    return exc_info.value


def test_parse_error_response_carries_kind_and_position():
    error = _parse_error()
    payload = create_error_response(error, ErrorContext(operation="parse"))

    assert payload["successful"] is False
    assert payload["message"] == str(error)
    assert payload["error"] == {
        "type": "FDParseError",
        "operation": "parse",
        "kind": "empty_segment",
        "position": 3,
    }


def test_limit_error_response():
    payload = create_error_response(AttributeLimitExceeded(9, 8), ErrorContext(operation="analyze_text"))
    assert payload["message"] == "Schema has 9 attributes; at most 8 can be analyzed"
    assert "kind" not in payload["error"]

    response = WorkerResponse.failure(payload)
    assert response.successful is False
    assert response.error.type == "AttributeLimitExceeded"


def test_handle_analysis_error_reraises_wrapped():
    context = ErrorContext(operation="analyze_text", attribute_count=3)
    with pytest.raises(AnalysisError) as exc_info:
        handle_analysis_error(ValueError("bad input"), context, log_level="warning", reraise=True)

    assert str(exc_info.value) == "[analyze_text] bad input"
    assert isinstance(exc_info.value.original_exception, ValueError)
    assert exc_info.value.error_type == "ValueError"


def test_handle_analysis_error_returns_payload():
    payload = handle_analysis_error(KeyError("x"), ErrorContext(operation="op"), log_level="error")
    assert payload["error"]["type"] == "KeyError"

"""Error Hierarchy: codes, severities and REST envelope."""

from movies_api.core.errors import (
    EmptyTitleError, InternalError, MalformedTitleError, MoviesError,
    ErrorCategory, ErrorContext, ErrorSeverity,
)


def test_empty_title_is_a_400_warning():
    err = EmptyTitleError()
    assert isinstance(err, MoviesError)
    assert err.code == "EMPTY_TITLE"
    assert err.http_status == 400
    assert err.severity is ErrorSeverity.WARNING
    assert err.category is ErrorCategory.VALIDATION


def test_malformed_title_mentions_encoding():
    err = MalformedTitleError("utf-8")
    assert err.code == "MALFORMED_TITLE"
    assert err.http_status == 400
    assert "utf-8" in err.message


def test_to_response_envelope():
    err = EmptyTitleError(ErrorContext(path="/movies"))
    body = err.to_response()["error"]
    assert body["code"] == "EMPTY_TITLE"
    assert body["category"] == "validation"
    assert body["severity"] == "warning"
    assert body["context"] == {"path": "/movies"}
    assert "timestamp" in body


def test_base_error_defaults_to_500():
    err = MoviesError("boom", "X", ErrorCategory.INTERNAL)
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.ERROR
    assert str(err) == "boom"


def test_internal_error_is_a_critical_500():
    err = InternalError(ErrorContext(path="/movies"))
    assert err.code == "INTERNAL_ERROR"
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.category is ErrorCategory.INTERNAL
    assert err.to_response()["error"]["context"] == {"path": "/movies"}

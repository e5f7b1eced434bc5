"""Tests for emiterator.errors — exception hierarchy and failure mapping."""

import pytest

from emiterator.errors import (
    ConfigurationError,
    EmiteratorError,
    SourceFailure,
    failure_from,
)


class TestHierarchy:
    def test_configuration_error_is_emiterator_error(self) -> None:
        assert issubclass(ConfigurationError, EmiteratorError)

    def test_source_failure_is_emiterator_error(self) -> None:
        assert issubclass(SourceFailure, EmiteratorError)


class TestSourceFailure:
    def test_names_kind(self) -> None:
        err = SourceFailure("error")
        assert err.kind == "error"
        assert err.payload is None
        assert str(err) == "source fired failure event 'error'"

    def test_includes_payload(self) -> None:
        err = SourceFailure("error", 404)
        assert err.payload == 404
        assert str(err) == "source fired failure event 'error': 404"


class TestFailureFrom:
    def test_exception_passed_through(self) -> None:
        error = OSError("disk")
        assert failure_from("error", (error, "extra")) is error

    def test_no_arguments(self) -> None:
        failure = failure_from("error", ())
        assert isinstance(failure, SourceFailure)
        assert failure.kind == "error"

    def test_none_argument(self) -> None:
        failure = failure_from("close", (None,))
        assert isinstance(failure, SourceFailure)
        assert failure.kind == "close"

    @pytest.mark.parametrize("payload", ["timeout", 0, {"code": 1}])
    def test_value_wrapped(self, payload: object) -> None:
        failure = failure_from("error", (payload,))
        assert isinstance(failure, SourceFailure)
        assert failure.payload == payload

    @pytest.mark.parametrize("error", [StopIteration("gen"), StopAsyncIteration("agen")])
    def test_iteration_stop_wrapped(self, error: BaseException) -> None:
        failure = failure_from("error", (error,))
        assert isinstance(failure, SourceFailure)
        assert failure.payload is error

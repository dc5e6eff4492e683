"""
Tests for the structured failure.

Tests AssertFailure and its constructor in isolation.
No external dependencies or IO required.
"""

import pytest

from httpassert.domain.errors import (
    UNKNOWN_STATUS_TEXT,
    AssertFailure,
    new_failure,
    status_text,
)


class TestStatusText:
    """Tests for the reason phrase lookup."""

    @pytest.mark.parametrize(
        ("status_code", "phrase"),
        [
            (400, "Bad Request"),
            (404, "Not Found"),
            (418, "I'm a Teapot"),
            (500, "Internal Server Error"),
        ],
    )
    def test_known_codes(self, status_code: int, phrase: str) -> None:
        """Known codes resolve to their standard phrase."""
        assert status_text(status_code) == phrase

    def test_unknown_code_falls_back(self) -> None:
        """Codes missing from the table resolve to the fallback phrase."""
        assert status_text(599) == UNKNOWN_STATUS_TEXT
        assert UNKNOWN_STATUS_TEXT == "Unknown Error"


class TestNewFailure:
    """Tests for the pure failure constructor."""

    def test_condition_held_returns_none(self) -> None:
        """No failure is built when the condition did not fail."""
        assert new_failure(False, 400, "Invalid input") is None

    def test_empty_message_resolved(self) -> None:
        """An empty message becomes the status text."""
        failure = new_failure(True, 404, "")
        assert failure is not None
        assert failure.status_code == 404
        assert failure.message == "Not Found"

    def test_message_kept_verbatim(self) -> None:
        """A non-empty message is never altered."""
        failure = new_failure(True, 400, "  Invalid input\n")
        assert failure is not None
        assert failure.message == "  Invalid input\n"

    def test_identical_inputs_give_equal_values(self) -> None:
        """Building a failure twice yields the same status and message."""
        first = new_failure(True, 409, "")
        second = new_failure(True, 409, "")
        assert first is not None and second is not None
        assert first.as_tuple() == second.as_tuple() == (409, "Conflict")

    def test_constructor_does_not_raise(self) -> None:
        """The constructor only returns the failure."""
        assert isinstance(new_failure(True, 500, "boom"), AssertFailure)


class TestAssertFailure:
    """Tests for the AssertFailure exception."""

    def test_str_is_message(self) -> None:
        """str() of the failure is its message."""
        assert str(AssertFailure(400, "Invalid input")) == "Invalid input"

    def test_attributes_read_only(self) -> None:
        """Status code and message cannot be changed after construction."""
        failure = AssertFailure(400)
        with pytest.raises(AttributeError):
            failure.status_code = 500  # type: ignore[misc]
        with pytest.raises(AttributeError):
            failure.message = "other"  # type: ignore[misc]

    def test_is_internal(self) -> None:
        """Only 500 is classified as a server fault."""
        assert AssertFailure(500).is_internal
        assert not AssertFailure(503).is_internal
        assert not AssertFailure(400).is_internal

    def test_traceback_text_contains_raise_site(self) -> None:
        """The formatted traceback includes the function that raised."""

        def raise_failure() -> None:
            raise AssertFailure(500, "Fail")

        with pytest.raises(AssertFailure) as exc_info:
            raise_failure()

        text = exc_info.value.traceback_text()
        assert "raise_failure" in text
        assert "AssertFailure: Fail" in text

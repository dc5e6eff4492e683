"""
Structured failure raised by assertions.

An AssertFailure pairs an HTTP status code with a human-readable
message. It is raised at the assertion site and travels up the
call stack until the recovery boundary renders it as a response.
No framework imports allowed.
"""

import traceback
from http import HTTPStatus

INTERNAL_SERVER_ERROR = HTTPStatus.INTERNAL_SERVER_ERROR.value

# Reason phrase used for status codes missing from the HTTPStatus table.
UNKNOWN_STATUS_TEXT = "Unknown Error"


def status_text(status_code: int) -> str:
    """Return the standard reason phrase for a status code.

    Args:
        status_code: The HTTP status code to describe.

    Returns:
        The reason phrase, or UNKNOWN_STATUS_TEXT for unrecognized codes.
    """
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return UNKNOWN_STATUS_TEXT


class AssertFailure(Exception):
    """Raised when an assertion fails.

    The message is resolved once, at construction time: an empty
    message becomes the reason phrase of the status code. Both
    attributes are read-only afterwards.
    """

    def __init__(self, status_code: int, message: str = "") -> None:
        if not message:
            message = status_text(status_code)
        self._status_code = status_code
        self._message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def message(self) -> str:
        return self._message

    @property
    def is_internal(self) -> bool:
        """Whether the failure is classified as a server fault (500)."""
        return self._status_code == INTERNAL_SERVER_ERROR

    def as_tuple(self) -> tuple[int, str]:
        return (self._status_code, self._message)

    def traceback_text(self) -> str:
        """Format the full traceback captured when the failure was raised."""
        return "".join(
            traceback.format_exception(type(self), self, self.__traceback__)
        )

    def __repr__(self) -> str:
        return f"AssertFailure({self._status_code!r}, {self._message!r})"


def new_failure(
    condition_failed: bool, status_code: int, message: str = ""
) -> AssertFailure | None:
    """Build a failure if the condition failed, without raising it.

    Args:
        condition_failed: Whether the asserted condition did not hold.
        status_code: HTTP status code of the failure.
        message: Response message. Empty means the default status text.

    Returns:
        The failure, or None when the condition held.
    """
    if not condition_failed:
        return None
    return AssertFailure(status_code, message)

"""
Assertions for HTTP request handlers.

Each assertion raises an AssertFailure carrying a status code and a
message when it does not hold. The failure is rendered as a response
by the recovery boundary, so handlers never thread error values back
through their callers:

    def login(payload: LoginRequest) -> SessionResponse:
        ok(payload.email != "", 400, "No username given")
        ok(payload.password != "", 400, "No password given")

        user = users.get(payload.email)
        ok(user is not None, 400, "Invalid username")
        ...

Assert scopes add a hook that runs right before the failure is raised,
e.g. to roll back a transaction.
"""

from collections.abc import Callable

from httpassert.domain.errors import INTERNAL_SERVER_ERROR, AssertFailure, new_failure

FailureHook = Callable[[], None]


def ok(condition: bool, status_code: int, message: str = "") -> None:
    """Raise with status_code and message if condition is false.

    If message is empty, the default status description is used.
    """
    failure = new_failure(not condition, status_code, message)
    if failure is not None:
        raise failure


def success(err: BaseException | None, status_code: int, message: str = "") -> None:
    """Raise with status_code and message if err is set.

    If message is empty, the default status description is used.
    """
    failure = new_failure(err is not None, status_code, message)
    if failure is not None:
        raise failure from err


def error(err: BaseException | None) -> None:
    """Raise a 500 Internal Server Error carrying err's text if err is set."""
    if err is not None:
        raise AssertFailure(INTERNAL_SERVER_ERROR, str(err)) from err


def throw(status_code: int, message: str = "") -> None:
    """Raise with status_code and message unconditionally."""
    raise AssertFailure(status_code, message)


class Assert:
    """Assertion scope with an optional failure hook.

    Owned by a single unit of work (usually one request). The hook is
    called exactly once, right before a failing assertion raises. It is
    not isolated: if the hook raises, that exception propagates instead
    of the failure.
    """

    def __init__(self) -> None:
        self._on_failure: FailureHook | None = None

    def on_failure(self, hook: FailureHook | None) -> None:
        """Register the hook called once an assertion fails.

        Replaces any previously registered hook.
        """
        self._on_failure = hook

    def _raise(self, failure: AssertFailure, cause: BaseException | None = None) -> None:
        if self._on_failure is not None:
            self._on_failure()
        if cause is None:
            raise failure
        raise failure from cause

    def ok(self, condition: bool, status_code: int, message: str = "") -> None:
        """Raise with status_code and message if condition is false."""
        failure = new_failure(not condition, status_code, message)
        if failure is not None:
            self._raise(failure)

    def success(
        self, err: BaseException | None, status_code: int, message: str = ""
    ) -> None:
        """Raise with status_code and message if err is set."""
        failure = new_failure(err is not None, status_code, message)
        if failure is not None:
            self._raise(failure, err)

    def error(self, err: BaseException | None) -> None:
        """Raise a 500 Internal Server Error carrying err's text if err is set."""
        if err is not None:
            self._raise(AssertFailure(INTERNAL_SERVER_ERROR, str(err)), err)

    def throw(self, status_code: int, message: str = "") -> None:
        """Raise with status_code and message unconditionally."""
        self._raise(AssertFailure(status_code, message))


def new() -> Assert:
    """Create a new assertion scope."""
    return Assert()

"""Exception hierarchy for fallible."""

from __future__ import annotations


class FallibleError(Exception):
    """Base exception for all fallible errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(FallibleError, RuntimeError):
    """``get()`` was called on a Failure.

    The wrapped failure is both ``__cause__`` and ``failure``, so it survives
    tracebacks and programmatic inspection alike.
    """

    def __init__(self, failure: BaseException) -> None:
        super().__init__(
            f"get() called on a Failure: {failure!r}",
            hint="Check is_success first, or use get_result()/get_failure().",
        )
        self.failure = failure
        self.__cause__ = failure


class UncheckedError(FallibleError, RuntimeError):
    """A non-RuntimeError raised inside an unchecked adapter."""

    def __init__(self, original: BaseException) -> None:
        super().__init__(f"{type(original).__name__}: {original}")
        self.original = original
        self.__cause__ = original


class OutcomeTypeError(FallibleError, TypeError):
    """A flat_map function returned something other than an Outcome."""

    def __init__(self, returned: object) -> None:
        super().__init__(
            f"flat_map function must return an Outcome, got {type(returned).__name__}",
            hint="Use map() for functions that return plain values.",
        )
        self.returned = returned


def root_cause(exc: BaseException) -> BaseException:
    """Follow ``__cause__`` links to the innermost exception."""
    seen: set[int] = {id(exc)}
    cur = exc
    while cur.__cause__ is not None and id(cur.__cause__) not in seen:
        cur = cur.__cause__
        seen.add(id(cur))
    return cur

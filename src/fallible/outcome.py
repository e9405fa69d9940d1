"""Outcome: a completed attempt that either succeeded or failed.

An Outcome is exactly one of two frozen variants:

- ``Success(value)`` holds the result of the computation.
- ``Failure(error)`` holds the exception that stopped it.

Combinators never let a captured failure escape, so a chain of ``map`` and
``flat_map`` calls reads top to bottom without nested ``try`` blocks:

    hexed = attempt_apply(int, raw).map(lambda n: format(n, "x"))
    match hexed:
        case Success(value):
            print(value)
        case Failure(error):
            print(f"not a number: {error}")

Only ``get()`` raises, and it always chains the original failure as
``__cause__``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Never, TypeGuard

from fallible._dev_flags import dev_validate_enabled
from fallible.checked import underlying
from fallible.errors import OutcomeTypeError, UnwrapError

if TYPE_CHECKING:
    from collections.abc import Callable

    from fallible.checked import CheckedFunction, CheckedSupplier

__all__ = [
    "Failure",
    "Outcome",
    "Success",
    "attempt",
    "attempt_apply",
    "attempt_apply_checked",
    "attempt_checked",
    "fail",
    "from_result",
    "is_outcome",
    "succeed",
]


@dataclass(frozen=True)
class Success[T]:
    """A successful outcome holding a non-None value."""

    value: T

    def __post_init__(self) -> None:
        """Reject ``None`` so a Success always carries a real value."""
        if self.value is None:
            raise ValueError("Success value may not be None")

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get_result(self) -> T:
        return self.value

    def get_failure(self) -> None:
        return None

    def get(self) -> T:
        return self.value

    def map[U](self, fn: Callable[[T], U]) -> Outcome[U]:
        """Apply *fn* to the value, capturing anything it raises."""
        return attempt_apply(fn, self.value)

    def flat_map[U](self, fn: Callable[[T], Outcome[U]]) -> Outcome[U]:
        """Apply *fn* to the value and return its Outcome without re-wrapping.

        An exception raised by *fn* becomes a Failure. When dev validation is
        enabled, a non-Outcome return value becomes a Failure carrying
        :class:`~fallible.errors.OutcomeTypeError`.
        """
        try:
            result = underlying(fn)(self.value)
        except Exception as exc:
            return Failure(exc)
        if dev_validate_enabled() and not is_outcome(result):
            return Failure(OutcomeTypeError(result))
        return result


@dataclass(frozen=True)
class Failure[E: BaseException]:
    """A failed outcome holding the exception that caused it."""

    error: E

    def __post_init__(self) -> None:
        """Reject ``None`` and non-exception payloads."""
        if self.error is None:
            raise ValueError("Failure error may not be None")
        if not isinstance(self.error, BaseException):
            raise TypeError(
                f"Failure error must be an exception, got {type(self.error).__name__}"
            )

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get_result(self) -> None:
        return None

    def get_failure(self) -> E:
        return self.error

    def get(self) -> Never:
        raise UnwrapError(self.error) from self.error

    def map(self, fn: Callable[[Any], Any]) -> Failure[E]:
        # fn is never called for a Failure
        del fn
        return Failure(self.error)

    def flat_map(self, fn: Callable[[Any], Any]) -> Failure[E]:
        del fn
        return Failure(self.error)


type Outcome[T] = Success[T] | Failure[BaseException]


def is_outcome(obj: object) -> TypeGuard[Success[Any] | Failure[Any]]:
    """Return True when *obj* is either Outcome variant."""
    return isinstance(obj, (Success, Failure))


# --- Construction ---


def succeed[T](value: T) -> Success[T]:
    """Build a successful Outcome. Raises ``ValueError`` for ``None``."""
    return Success(value)


def fail[E: BaseException](error: E) -> Failure[E]:
    """Build a failed Outcome.

    Raises ``ValueError`` for ``None`` and ``TypeError`` for anything that is
    not an exception instance.
    """
    return Failure(error)


def from_result[T](result: T) -> Outcome[T]:
    """Wrap a returned value, treating ``None`` as a captured ValueError."""
    if result is None:
        return Failure(ValueError("attempted callable returned None"))
    return Success(result)


def attempt[T](thunk: Callable[[], T] | CheckedSupplier[T]) -> Outcome[T]:
    """Call *thunk* and capture its result or the exception it raised.

    Total for any ``Exception``: nothing raised by *thunk* propagates. A
    ``None`` return cannot be a Success, so it is captured as a Failure
    holding a ``ValueError`` instead of raising from the constructor, which
    keeps ``attempt`` total even for functions that fall off the end.
    ``BaseException`` subclasses outside ``Exception`` (cancellation,
    ``KeyboardInterrupt``) still propagate.
    """
    func = underlying(thunk)
    try:
        result = func()
    except Exception as exc:
        return Failure(exc)
    return from_result(result)


def attempt_checked[T](thunk: CheckedSupplier[T] | Callable[[], T]) -> Outcome[T]:
    """Alias of :func:`attempt` for thunks wrapped in ``CheckedSupplier``."""
    return attempt(thunk)


def attempt_apply[A, T](
    fn: Callable[[A], T] | CheckedFunction[A, T], arg: A
) -> Outcome[T]:
    """Apply *fn* to *arg*, with the same capture rules as :func:`attempt`."""
    func = underlying(fn)
    try:
        result = func(arg)
    except Exception as exc:
        return Failure(exc)
    return from_result(result)


def attempt_apply_checked[A, T](
    fn: CheckedFunction[A, T] | Callable[[A], T], arg: A
) -> Outcome[T]:
    """Alias of :func:`attempt_apply` for functions wrapped in ``CheckedFunction``."""
    return attempt_apply(fn, arg)

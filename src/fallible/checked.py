"""Checked-to-unchecked adapters.

Python has no checked exceptions, so the split is drawn between the
``RuntimeError`` family, which passes through untouched, and every other
``Exception``, which is wrapped in :class:`~fallible.errors.UncheckedError`
with the original attached as ``__cause__``.

Example:
    read = CheckedFunction(Path.read_text)
    text = read.to_unchecked()(path)  # OSError surfaces as UncheckedError
"""

from __future__ import annotations

from dataclasses import dataclass
import functools
from typing import TYPE_CHECKING, Any

from fallible.errors import UncheckedError

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["CheckedFunction", "CheckedSupplier", "unchecked"]


def unchecked[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Wrap *func* so that only RuntimeErrors escape it."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except RuntimeError:
            raise
        except Exception as exc:
            raise UncheckedError(exc) from exc

    return wrapper


@dataclass(frozen=True)
class CheckedSupplier[T]:
    """A zero-argument callable that may raise any exception."""

    func: Callable[[], T]

    def __call__(self) -> T:
        return self.func()

    def to_unchecked(self) -> Callable[[], T]:
        """Return a callable raising only RuntimeErrors."""
        return unchecked(self.func)


@dataclass(frozen=True)
class CheckedFunction[T, R]:
    """A one-argument callable that may raise any exception."""

    func: Callable[[T], R]

    def __call__(self, arg: T) -> R:
        return self.func(arg)

    def to_unchecked(self) -> Callable[[T], R]:
        """Return a callable raising only RuntimeErrors."""
        return unchecked(self.func)


def underlying(func: Any) -> Any:
    """Return the plain callable behind a checked adapter, or *func* itself."""
    if isinstance(func, (CheckedSupplier, CheckedFunction)):
        return func.func
    return func

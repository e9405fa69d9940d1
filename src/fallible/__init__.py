"""fallible: composable success-or-failure outcomes.

Public API:
    - succeed() / fail(): Build an Outcome directly
    - attempt() / attempt_apply(): Capture a callable's result or exception
    - Success / Failure: The two Outcome variants
    - wrap_async() / wrap_concurrent(): Bridge futures into Outcomes
    - CheckedSupplier / CheckedFunction / unchecked(): Exception adapters
"""

from __future__ import annotations

import logging

from fallible.checked import CheckedFunction, CheckedSupplier, unchecked
from fallible.errors import (
    FallibleError,
    OutcomeTypeError,
    UncheckedError,
    UnwrapError,
    root_cause,
)
from fallible.futures import from_awaitable, wrap_async, wrap_concurrent
from fallible.outcome import (
    Failure,
    Outcome,
    Success,
    attempt,
    attempt_apply,
    attempt_apply_checked,
    attempt_checked,
    fail,
    is_outcome,
    succeed,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "CheckedFunction",
    "CheckedSupplier",
    "Failure",
    "FallibleError",
    "Outcome",
    "OutcomeTypeError",
    "Success",
    "UncheckedError",
    "UnwrapError",
    "attempt",
    "attempt_apply",
    "attempt_apply_checked",
    "attempt_checked",
    "fail",
    "from_awaitable",
    "is_outcome",
    "root_cause",
    "succeed",
    "unchecked",
    "wrap_async",
    "wrap_concurrent",
]

"""Pytest configuration and fixtures.

Provides environment isolation and shared test doubles. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class CountingFn:
    """Callable test double that records every call.

    Returns ``result`` or raises ``error`` when set. Use to verify that
    combinators call (or skip) their function exactly as often as promised.
    """

    result: Any = "called"
    error: BaseException | None = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting_fn() -> CountingFn:
    """Return a fresh CountingFn (not autouse)."""
    return CountingFn()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_fallible_env(monkeypatch):
    """Clear FALLIBLE_* env vars so dev flags start disabled in every test."""
    for key in list(os.environ.keys()):
        if key.startswith("FALLIBLE_"):
            monkeypatch.delenv(key, raising=False)

"""Internal helpers for development-time feature flags.

Flags are read from the environment on every call so tests and long-running
processes can toggle them without re-importing the package.
"""

from __future__ import annotations

import os

__all__ = ["dev_validate_enabled"]


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Return True when dev-time validation is enabled.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``FALLIBLE_VALIDATE`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("FALLIBLE_VALIDATE") == "1"

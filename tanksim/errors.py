"""Error taxonomy and input checks for physical parameters."""

from __future__ import annotations

import math


class DomainError(ValueError):
    """Raised when a physical input is outside the domain the model accepts."""


def ensure_finite(value: float, name: str) -> None:
    if not math.isfinite(value):
        raise DomainError(f"{name} must be finite, got {value}")


def ensure_positive(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value <= 0:
        raise DomainError(f"{name} must be > 0, got {value}")


def ensure_non_negative(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value < 0:
        raise DomainError(f"{name} must be >= 0, got {value}")

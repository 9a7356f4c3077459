"""Darcy friction factor with a two-regime rule."""

from __future__ import annotations

from .constants import (
    LAMINAR_FRICTION_COEFFICIENT,
    LAMINAR_REYNOLDS_LIMIT,
    TURBULENT_FRICTION_FACTOR,
)
from .errors import DomainError


def friction_factor(reynolds_number: float) -> float:
    """Return the Darcy friction factor for ``reynolds_number``.

    Laminar flow (Re < 2000) uses the analytic ``64 / Re``. Anything else gets a
    fixed 0.02, a typical turbulent value rather than a Colebrook-White solve.
    """
    if reynolds_number <= 0:
        raise DomainError(f"reynolds_number must be > 0, got {reynolds_number}")
    if reynolds_number < LAMINAR_REYNOLDS_LIMIT:
        return LAMINAR_FRICTION_COEFFICIENT / reynolds_number
    return TURBULENT_FRICTION_FACTOR

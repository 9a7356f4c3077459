"""Pipe head loss (Darcy-Weisbach) and hydraulic pump power."""

from __future__ import annotations

import math

from .constants import GRAVITY_M_S2, WATER_VISCOSITY_PA_S
from .errors import DomainError
from .friction import friction_factor
from .models import HeadLoss, Pipe, Pump


def pipe_area(diameter_m: float) -> float:
    return math.pi * (diameter_m / 2.0) ** 2


def reynolds_number(pipe: Pipe, velocity_m_s: float) -> float:
    return pipe.density * velocity_m_s * pipe.diameter / WATER_VISCOSITY_PA_S


def head_loss(pipe: Pipe, flow_rate_m3_s: float) -> HeadLoss:
    """Compute the friction head loss for ``flow_rate_m3_s`` through ``pipe``.

    The pipe is not modified; the resulting velocity is part of the returned value.
    Zero flow is an idle pump and yields a zero loss without touching the friction
    model, whose Reynolds number would otherwise be zero.
    """
    if flow_rate_m3_s < 0:
        raise DomainError(f"flow_rate must be >= 0, got {flow_rate_m3_s}")
    if flow_rate_m3_s == 0:
        return HeadLoss(head_loss=0.0, velocity=0.0, reynolds_number=0.0, friction_factor=0.0)

    velocity = flow_rate_m3_s / pipe_area(pipe.diameter)
    re = reynolds_number(pipe, velocity)
    f = friction_factor(re)
    loss = f * (pipe.length / pipe.diameter) * velocity**2 / (2.0 * GRAVITY_M_S2)
    return HeadLoss(head_loss=loss, velocity=velocity, reynolds_number=re, friction_factor=f)


def pump_power(pump: Pump, pipe: Pipe) -> float:
    """Hydraulic power in watts: rho * g * Q * H."""
    return pipe.density * GRAVITY_M_S2 * pump.flow_rate * pump.head

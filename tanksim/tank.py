"""Per-step tank update: feasibility check, level integration and clamping."""

from __future__ import annotations

import logging
import math

from .errors import ensure_positive
from .hydraulics import head_loss, pump_power
from .models import Pipe, Pump, StepOutcome, StepStatus, Tank

logger = logging.getLogger(__name__)


def tank_area(tank: Tank) -> float:
    return math.pi * tank.radius**2


def clamp_level(tank: Tank, level_m: float) -> float:
    return max(0.0, min(level_m, tank.height))


def update_tank(tank: Tank, pump: Pump, pipe: Pipe, time_step: float) -> StepOutcome:
    """Advance ``tank`` by one step of ``time_step`` seconds.

    When the pump head cannot cover the pipe loss the level is left as it was and
    the step reports PUMP_INSUFFICIENT. Otherwise the full pump flow enters the tank;
    losses only take part in the feasibility check. A level pushed above the tank
    height is clamped and reported as OVERFLOW, as is every step that starts with
    the tank already full. Landing exactly on the height is still NOMINAL.

    Pump power is recomputed on every step, stalled ones included, so a stalled
    step still reports the power of a running pump.
    """
    ensure_positive(time_step, "time_step")

    loss = head_loss(pipe, pump.flow_rate)
    pipe.velocity = loss.velocity

    if pump.head < loss.head_loss:
        logger.debug(
            "Pump head below pipe loss head_m=%.4f head_loss_m=%.4f", pump.head, loss.head_loss
        )
        status = StepStatus.PUMP_INSUFFICIENT
    else:
        already_full = tank.water_level >= tank.height
        level = tank.water_level + (pump.flow_rate / tank_area(tank)) * time_step
        if level > tank.height or already_full:
            status = StepStatus.OVERFLOW
        else:
            status = StepStatus.NOMINAL
        tank.water_level = clamp_level(tank, level)

    pump.power = pump_power(pump, pipe)
    return StepOutcome(
        water_level=tank.water_level,
        flow_rate=pump.flow_rate,
        pump_power=pump.power,
        status=status,
        head_loss=loss.head_loss,
    )

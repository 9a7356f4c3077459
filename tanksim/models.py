"""Plant entities and the per-step values the simulation reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .constants import (
    DEFAULT_FLUID_DENSITY_KG_M3,
    DEFAULT_PIPE_DIAMETER_M,
    DEFAULT_PIPE_LENGTH_M,
    DEFAULT_PIPE_ROUGHNESS,
    DEFAULT_PUMP_FLOW_RATE_M3_S,
    DEFAULT_PUMP_HEAD_M,
    DEFAULT_TANK_HEIGHT_M,
    DEFAULT_TANK_RADIUS_M,
)


class StepStatus(str, Enum):
    NOMINAL = "NOMINAL"
    PUMP_INSUFFICIENT = "PUMP_INSUFFICIENT"
    OVERFLOW = "OVERFLOW"


@dataclass
class Pump:
    flow_rate: float = DEFAULT_PUMP_FLOW_RATE_M3_S  # m3/s
    head: float = DEFAULT_PUMP_HEAD_M  # m
    power: float = 0.0  # W, recomputed every step


@dataclass
class Pipe:
    """Pipe geometry plus the fluid carried through it.

    ``density`` belongs to the fluid, not the pipe material. ``roughness`` is kept
    with the rest of the pipe parameters but no formula reads it.
    """

    length: float = DEFAULT_PIPE_LENGTH_M  # m
    diameter: float = DEFAULT_PIPE_DIAMETER_M  # m
    roughness: float = DEFAULT_PIPE_ROUGHNESS
    velocity: float = 0.0  # m/s, recomputed every step
    density: float = DEFAULT_FLUID_DENSITY_KG_M3  # kg/m3


@dataclass
class Tank:
    height: float = DEFAULT_TANK_HEIGHT_M  # m
    radius: float = DEFAULT_TANK_RADIUS_M  # m
    water_level: float = 0.0  # m


@dataclass(frozen=True)
class HeadLoss:
    head_loss: float  # m
    velocity: float  # m/s
    reynolds_number: float
    friction_factor: float


@dataclass(frozen=True)
class StepOutcome:
    water_level: float
    flow_rate: float
    pump_power: float
    status: StepStatus
    head_loss: float = 0.0


@dataclass(frozen=True)
class StepRecord:
    time: float
    water_level: float
    flow_rate: float
    pump_power: float
    status: StepStatus

    @classmethod
    def from_outcome(cls, time: float, outcome: StepOutcome) -> "StepRecord":
        return cls(
            time=time,
            water_level=outcome.water_level,
            flow_rate=outcome.flow_rate,
            pump_power=outcome.pump_power,
            status=outcome.status,
        )

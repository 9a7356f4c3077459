"""Pump-pipe-tank filling model advanced over fixed time steps."""

from .errors import DomainError
from .friction import friction_factor
from .hydraulics import head_loss, pump_power
from .models import HeadLoss, Pipe, Pump, StepOutcome, StepRecord, StepStatus, Tank
from .state import TankFillingSimulation, run
from .tank import update_tank

__all__ = [
    "DomainError",
    "HeadLoss",
    "Pipe",
    "Pump",
    "StepOutcome",
    "StepRecord",
    "StepStatus",
    "Tank",
    "TankFillingSimulation",
    "friction_factor",
    "head_loss",
    "pump_power",
    "run",
    "update_tank",
]

"""Fixed time-step simulation loop that fills the tank one tick at a time."""

from __future__ import annotations

import logging
from typing import Iterator

from .constants import DEFAULT_TIME_STEP_S
from .errors import ensure_positive
from .models import Pipe, Pump, StepRecord, StepStatus, Tank
from .tank import update_tank

logger = logging.getLogger(__name__)


class TankFillingSimulation:
    """Owns one pump, pipe and tank and mutates them tick by tick.

    The instance is not restartable: a second run continues from the mutated
    state, so build fresh entities for an independent run.
    """

    def __init__(
        self,
        pump: Pump,
        pipe: Pipe,
        tank: Tank,
        time_step: float = DEFAULT_TIME_STEP_S,
    ) -> None:
        ensure_positive(time_step, "time_step")
        self._pump = pump
        self._pipe = pipe
        self._tank = tank
        self._time_step = time_step
        self._tick = 0

    @property
    def time_step(self) -> float:
        return self._time_step

    @property
    def current_time(self) -> float:
        return self._tick * self._time_step

    def step(self) -> StepRecord:
        time = self.current_time
        outcome = update_tank(self._tank, self._pump, self._pipe, self._time_step)
        self._tick += 1
        return StepRecord.from_outcome(time, outcome)

    def run(self, duration: float) -> Iterator[StepRecord]:
        ensure_positive(duration, "duration")
        return self._iterate(duration)

    def _iterate(self, duration: float) -> Iterator[StepRecord]:
        logger.info(
            "Starting tank filling simulation duration_s=%s time_step_s=%s",
            duration,
            self._time_step,
        )
        previous_status: StepStatus | None = None
        steps = 0
        while self.current_time < duration:
            record = self.step()
            if record.status is not previous_status and record.status is not StepStatus.NOMINAL:
                logger.info("Step status changed to %s at t=%.2f", record.status.value, record.time)
            previous_status = record.status
            steps += 1
            yield record
        logger.info(
            "Simulation finished steps=%s water_level_m=%.4f", steps, self._tank.water_level
        )


def run(
    pump: Pump,
    pipe: Pipe,
    tank: Tank,
    duration: float,
    time_step: float,
) -> Iterator[StepRecord]:
    """Yield one record per tick at t = 0, dt, 2*dt, ... while t < duration.

    Inputs are checked eagerly, so a bad duration or time step fails here rather
    than on the first ``next()``.
    """
    simulation = TankFillingSimulation(pump, pipe, tank, time_step=time_step)
    return simulation.run(duration)

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_FLUID_DENSITY_KG_M3,
    DEFAULT_PIPE_DIAMETER_M,
    DEFAULT_PIPE_LENGTH_M,
    DEFAULT_PIPE_ROUGHNESS,
    DEFAULT_PUMP_FLOW_RATE_M3_S,
    DEFAULT_PUMP_HEAD_M,
    DEFAULT_SIMULATION_DURATION_S,
    DEFAULT_TANK_HEIGHT_M,
    DEFAULT_TANK_RADIUS_M,
    DEFAULT_TIME_STEP_S,
)
from .errors import DomainError, ensure_non_negative, ensure_positive
from .models import Pipe, Pump, Tank


class SimulationSettings(BaseSettings):
    """Plant and run parameters loaded from environment variables (TANKSIM_*)."""

    # Pump
    pump_flow_rate: float = DEFAULT_PUMP_FLOW_RATE_M3_S
    pump_head: float = DEFAULT_PUMP_HEAD_M

    # Pipe (density is the fluid's)
    pipe_length: float = DEFAULT_PIPE_LENGTH_M
    pipe_diameter: float = DEFAULT_PIPE_DIAMETER_M
    pipe_roughness: float = DEFAULT_PIPE_ROUGHNESS
    fluid_density: float = DEFAULT_FLUID_DENSITY_KG_M3

    # Tank
    tank_height: float = DEFAULT_TANK_HEIGHT_M
    tank_radius: float = DEFAULT_TANK_RADIUS_M
    initial_water_level: float = 0.0

    # Run
    simulation_duration: float = DEFAULT_SIMULATION_DURATION_S
    time_step: float = DEFAULT_TIME_STEP_S
    realtime: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="TANKSIM_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    def validate_physics(self) -> None:
        ensure_non_negative(self.pump_flow_rate, "pump_flow_rate")
        ensure_non_negative(self.pump_head, "pump_head")
        ensure_positive(self.pipe_length, "pipe_length")
        ensure_positive(self.pipe_diameter, "pipe_diameter")
        ensure_non_negative(self.pipe_roughness, "pipe_roughness")
        ensure_positive(self.fluid_density, "fluid_density")
        ensure_positive(self.tank_height, "tank_height")
        ensure_positive(self.tank_radius, "tank_radius")
        ensure_non_negative(self.initial_water_level, "initial_water_level")
        if self.initial_water_level > self.tank_height:
            raise DomainError(
                f"initial_water_level must be <= tank_height ({self.tank_height}), "
                f"got {self.initial_water_level}"
            )
        ensure_positive(self.simulation_duration, "simulation_duration")
        ensure_positive(self.time_step, "time_step")

    def build_system(self) -> tuple[Pump, Pipe, Tank]:
        """Validate the parameters and return fresh entities for one run."""
        self.validate_physics()
        pump = Pump(flow_rate=self.pump_flow_rate, head=self.pump_head)
        pipe = Pipe(
            length=self.pipe_length,
            diameter=self.pipe_diameter,
            roughness=self.pipe_roughness,
            density=self.fluid_density,
        )
        tank = Tank(
            height=self.tank_height,
            radius=self.tank_radius,
            water_level=self.initial_water_level,
        )
        return pump, pipe, tank


@lru_cache
def get_settings() -> SimulationSettings:
    return SimulationSettings()

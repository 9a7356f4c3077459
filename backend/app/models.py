from typing import List, Optional

from pydantic import BaseModel, Field

from tanksim.config import SimulationSettings
from tanksim.models import StepRecord, StepStatus


class PumpParameters(BaseModel):
    flow_rate: float = Field(description="m3/s")
    head: float = Field(description="m")


class PipeParameters(BaseModel):
    length: float = Field(description="m")
    diameter: float = Field(description="m")
    roughness: float = Field(description="dimensionless, not used by any formula")
    density: float = Field(description="fluid density, kg/m3")


class TankParameters(BaseModel):
    height: float = Field(description="m")
    radius: float = Field(description="m")
    initial_water_level: float = Field(default=0.0, description="m")


class SimulationRequest(BaseModel):
    pump: PumpParameters
    pipe: PipeParameters
    tank: TankParameters
    duration: float = Field(description="s")
    time_step: float = Field(description="s")

    @classmethod
    def from_settings(cls, settings: SimulationSettings) -> "SimulationRequest":
        return cls(
            pump=PumpParameters(flow_rate=settings.pump_flow_rate, head=settings.pump_head),
            pipe=PipeParameters(
                length=settings.pipe_length,
                diameter=settings.pipe_diameter,
                roughness=settings.pipe_roughness,
                density=settings.fluid_density,
            ),
            tank=TankParameters(
                height=settings.tank_height,
                radius=settings.tank_radius,
                initial_water_level=settings.initial_water_level,
            ),
            duration=settings.simulation_duration,
            time_step=settings.time_step,
        )

    def to_settings(self) -> SimulationSettings:
        return SimulationSettings.model_construct(
            pump_flow_rate=self.pump.flow_rate,
            pump_head=self.pump.head,
            pipe_length=self.pipe.length,
            pipe_diameter=self.pipe.diameter,
            pipe_roughness=self.pipe.roughness,
            fluid_density=self.pipe.density,
            tank_height=self.tank.height,
            tank_radius=self.tank.radius,
            initial_water_level=self.tank.initial_water_level,
            simulation_duration=self.duration,
            time_step=self.time_step,
        )


class StepRecordModel(BaseModel):
    time: float
    water_level: float
    flow_rate: float
    pump_power: float
    status: StepStatus

    @classmethod
    def from_record(cls, record: StepRecord) -> "StepRecordModel":
        return cls(
            time=record.time,
            water_level=record.water_level,
            flow_rate=record.flow_rate,
            pump_power=record.pump_power,
            status=record.status,
        )


class RunSummary(BaseModel):
    steps: int = Field(ge=0)
    final_water_level: Optional[float] = None
    peak_pump_power: Optional[float] = None
    status_counts: dict[str, int]
    first_overflow_time: Optional[float] = None


class SimulationResponse(BaseModel):
    records: List[StepRecordModel]
    summary: RunSummary

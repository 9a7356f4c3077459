import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from app.config import Settings, get_settings
from app.models import RunSummary, SimulationRequest, SimulationResponse, StepRecordModel
from tanksim.config import SimulationSettings
from tanksim.config import get_settings as get_simulation_settings
from tanksim.errors import DomainError
from tanksim.report import summarize
from tanksim.state import run

router = APIRouter(prefix="/simulation", tags=["simulation"])
logger = logging.getLogger(__name__)


@router.get("/defaults", response_model=SimulationRequest)
async def read_defaults(
    simulation_settings: SimulationSettings = Depends(get_simulation_settings),
) -> SimulationRequest:
    return SimulationRequest.from_settings(simulation_settings)


@router.post("/run", response_model=SimulationResponse)
def run_simulation(
    request: Optional[SimulationRequest] = Body(default=None),
    settings: Settings = Depends(get_settings),
    simulation_settings: SimulationSettings = Depends(get_simulation_settings),
) -> SimulationResponse:
    """Run one simulation with fresh entities and return every step record.

    Without a body the configured defaults are used. The tick loop is synchronous,
    so the handler is a plain function and runs in the threadpool.
    """
    request = request or SimulationRequest.from_settings(simulation_settings)
    logger.info(
        "Received simulation request duration_s=%s time_step_s=%s",
        request.duration,
        request.time_step,
    )
    try:
        pump, pipe, tank = request.to_settings().build_system()
        if request.duration / request.time_step > settings.max_steps:
            raise HTTPException(
                status_code=422,
                detail=f"duration / time_step exceeds max_steps ({settings.max_steps})",
            )
        records = list(run(pump, pipe, tank, request.duration, request.time_step))
    except DomainError as exc:
        logger.warning("Rejected simulation request: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return SimulationResponse(
        records=[StepRecordModel.from_record(record) for record in records],
        summary=RunSummary(**summarize(records)),
    )

import logging

from fastapi import APIRouter

router = APIRouter(tags=["system"])
logger = logging.getLogger(__name__)


@router.get("/health", response_model=dict)
async def read_health() -> dict:
    logger.debug("Received health check")
    return {"status": "ok"}

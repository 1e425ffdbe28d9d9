import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from backend.core.database import Database, get_database
from backend.models import HealthOut

log = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_model=HealthOut,
    responses={503: {"model": HealthOut}},
    summary="Service status and database readiness",
)
def health(database: Database = Depends(get_database)):
    log.info("GET / health check endpoint hit")
    if database.is_ready():
        body = HealthOut(status="UP", message="Backend is healthy and MongoDB is connected.")
        return JSONResponse(status_code=200, content=body.model_dump())
    body = HealthOut(status="DOWN", message="Backend is up, but MongoDB connection is not ready.")
    return JSONResponse(status_code=503, content=body.model_dump())

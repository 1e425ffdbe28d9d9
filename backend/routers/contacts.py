import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.requests import Request

from backend.core.database import Database, get_database
from backend.models import ContactCreate, MessageOut

log = logging.getLogger(__name__)

router = APIRouter(tags=["contacts"])

REQUIRED_FIELDS_MESSAGE = "Name and phone are required"


async def read_json_body(request: Request) -> Any:
    """Raw JSON body, or None when the body is empty or not valid JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageOut(message=message).model_dump())


@router.post(
    "/contact",
    status_code=201,
    response_model=MessageOut,
    responses={400: {"model": MessageOut}, 500: {"model": MessageOut}, 503: {"model": MessageOut}},
    summary="Store a contact form submission",
)
def create_contact(
    body: Any = Depends(read_json_body),
    database: Database = Depends(get_database),
):
    log.info("POST /contact endpoint hit")
    if not database.is_ready():
        log.error("Error saving contact: MongoDB is not connected.")
        return _message(503, "Service unavailable: Database connection error")

    payload = ContactCreate.model_validate(body) if isinstance(body, dict) else ContactCreate()
    if not payload.is_complete():
        log.info("POST /contact: Name or phone missing.")
        return _message(400, REQUIRED_FIELDS_MESSAGE)

    try:
        database.save_contact(payload.to_contact())
    except PyMongoError:
        log.exception("Error saving contact")
        return _message(500, "Server error while saving contact")

    log.info("POST /contact: Contact saved successfully.")
    return _message(201, "Contact saved")

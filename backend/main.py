from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool

from backend.core.config import Settings, get_settings
from backend.core.database import Database
from backend.routers import contacts, health

log = logging.getLogger(__name__)


CORE_ROUTERS = (
    (health.router, {"tags": ["health"]}),
    (contacts.router, {}),
)


@asynccontextmanager
async def lifespan(application: FastAPI):
    database: Database = application.state.database
    connect_task = None
    # The listener comes up right away; readiness shows up in the health check.
    if not database.connected:
        connect_task = asyncio.create_task(run_in_threadpool(database.connect))
    try:
        yield
    finally:
        if connect_task is not None:
            await connect_task
        database.close()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    settings = settings or get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.database = database or Database.from_settings(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router, include_kwargs in CORE_ROUTERS:
        application.include_router(router, **include_kwargs)

    return application

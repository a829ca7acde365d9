"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hostel_occupancy.api.router import api_router
from hostel_occupancy.config import get_settings
from hostel_occupancy.db.engine import engine, create_tables
from hostel_occupancy.errors import OccupancyError
from hostel_occupancy.logging_setup import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings().logging)
    await create_tables()
    yield
    await engine.dispose()


app = FastAPI(
    title="Hostel Occupancy",
    description="Room occupancy bookkeeping for shared-occupancy hostels: vacancy views and guarded room assignment.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(api_router)


@app.exception_handler(OccupancyError)
async def occupancy_error_handler(request: Request, exc: OccupancyError):
    logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.get("/health")
async def health():
    return {"status": "ok"}

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import trainerbook.models  # noqa: F401  register all models with Base.metadata
from trainerbook.api.routes.availability import router as availability_router
from trainerbook.api.routes.trainers import router as trainers_router
from trainerbook.config import get_settings
from trainerbook.database import Base, engine
from trainerbook.scheduling.errors import SchedulingError
from trainerbook.schemas.system import StatusResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Create tables on startup (no migrations yet)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await engine.dispose()


async def scheduling_error_handler(request: Request, exc: SchedulingError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="TrainerBook",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_exception_handler(SchedulingError, scheduling_error_handler)

    app.include_router(trainers_router)
    app.include_router(availability_router)

    @app.get("/api/system/status", response_model=StatusResponse)
    async def system_status() -> StatusResponse:
        return StatusResponse(status="ok")

    return app


app = create_app()

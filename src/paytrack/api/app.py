"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel
from paytrack.logging import configure_logging
from paytrack.domain.exceptions import (
    ExportError, ExportUnavailableError, InvalidPeriodError, NotFoundError,
)


def create_app() -> FastAPI:
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from paytrack.infra.db.engine import engine  # triggers WAL pragma + mapper registration
        SQLModel.metadata.create_all(engine)
        yield

    app = FastAPI(
        title="Paytrack API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from paytrack.api.routers.entries import router as entries_router
    from paytrack.api.routers.months import router as months_router
    from paytrack.api.routers.settings import router as settings_router
    from paytrack.api.routers.charts import router as charts_router

    app.include_router(entries_router)
    app.include_router(months_router)
    app.include_router(settings_router)
    app.include_router(charts_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(InvalidPeriodError)
    def _invalid_period(request: Request, exc: InvalidPeriodError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": exc.message})

    @app.exception_handler(ExportUnavailableError)
    def _export_unavailable(request: Request, exc: ExportUnavailableError) -> JSONResponse:
        return JSONResponse(status_code=501, content={"detail": exc.message})

    @app.exception_handler(ExportError)
    def _export_failed(request: Request, exc: ExportError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app

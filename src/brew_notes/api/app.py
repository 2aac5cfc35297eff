"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from brew_notes.api.entries import router as entries_router
from brew_notes.api.preferences import router as preferences_router
from brew_notes.app_logging import configure_logging
from brew_notes.containers import AppContainer
from brew_notes.domain.errors import InvalidEntryError, NotFoundError, PersistenceError
from brew_notes.services.entries import EntryChange

UNPROCESSABLE_ENTITY = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        unsubscribe()
        await app.state.container.close_resources()

    app = FastAPI(title="Brew Notes", lifespan=lifespan)
    app.state.container = container
    app.state.revision = 0

    def on_entries_changed(change: EntryChange) -> None:
        app.state.revision += 1
        logger.debug(
            "Entries changed: kind=%s revision=%s", change.kind, app.state.revision
        )

    unsubscribe = container.entry_service.subscribe(on_entries_changed)

    app.include_router(entries_router)
    app.include_router(preferences_router)

    @app.exception_handler(NotFoundError)
    async def not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidEntryError)
    async def invalid_entry(_request: Request, exc: InvalidEntryError) -> JSONResponse:
        return JSONResponse(
            status_code=UNPROCESSABLE_ENTITY,
            content={"detail": str(exc)},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_failed(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        logger.exception(
            "Storage operation failed",
            extra={"path": request.url.path},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage is unavailable."},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app

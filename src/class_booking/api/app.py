"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from class_booking.api.bookings import router as bookings_router
from class_booking.api.classes import router as classes_router
from class_booking.api.templating import templates
from class_booking.app_logging import configure_logging
from class_booking.containers import AppContainer
from class_booking.domain.errors import NotFoundError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=container.settings.app_title)
    app.state.container = container

    app.include_router(classes_router)
    app.include_router(bookings_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.reason)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content=exc.to_payload()
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(
        request: Request, exc: NotFoundError
    ) -> JSONResponse:
        logger.info("Not found %s %s: %s", request.method, request.url.path, exc.reason)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content=exc.to_payload()
        )

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request) -> HTMLResponse:
        """Serve the class creation form."""
        return templates.TemplateResponse(
            request, "home.html", {"title": container.settings.app_title}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app

"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from calorie_vita.api.analytics import router as analytics_router
from calorie_vita.app_logging import configure_logging
from calorie_vita.containers import AppContainer
from calorie_vita.domain.errors import InvalidInputError, ProfileIncompleteError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="calorie-vita")
    app.state.container = container

    app.include_router(analytics_router)

    @app.exception_handler(ProfileIncompleteError)
    async def profile_incomplete(
        request: Request, exc: ProfileIncompleteError
    ) -> JSONResponse:
        logger.info("Profile incomplete: user=%s missing=%s", exc.user_id, exc.missing)
        return JSONResponse(
            status_code=404,
            content={"detail": str(exc), "missing": exc.missing},
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        logger.warning("Rejected analytics input on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app

"""Read-only HTTP API over the scoreboard service."""

from fastapi import FastAPI

from scoreline.api.routes.espn import router as espn_router
from scoreline.services import ScoreboardService


def create_app(service: ScoreboardService | None = None) -> FastAPI:
    """Create a FastAPI app with the ESPN routes mounted.

    Args:
        service: Optional service to share; one is created lazily otherwise
    """
    app = FastAPI(title="scoreline")
    if service is not None:
        app.state.scoreboard_service = service
    app.include_router(espn_router)
    return app


__all__ = ["create_app"]

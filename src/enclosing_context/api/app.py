from __future__ import annotations

from fastapi import FastAPI

from enclosing_context.api.routes.context import router as context_router
from enclosing_context.api.routes.health import router as health_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Enclosing Context API",
        description="Find the Python construct that encloses a line range.",
        version="0.1.0",
    )

    app.include_router(health_router, include_in_schema=False)
    app.include_router(context_router)

    return app

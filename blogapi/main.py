import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from blogapi.core.config import Settings, configure_logging, settings as default_settings
from blogapi.core.response.handlers import (
    global_exception_handler,
    validation_exception_handler,
)

# Import routers from apps
from blogapi.apps.blog import PostRouter, PostStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "%s started with %d post(s) at %s",
        app.title, app.state.store.count(), app.state.settings.API_PREFIX,
    )
    yield
    logger.info("Shutting down...")


def create_app(
    settings: Optional[Settings] = None, store: Optional[PostStore] = None
) -> FastAPI:
    """Build the application around an explicitly provided (or fresh) store."""
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    if store is None:
        store = PostStore()
        if settings.SEED_SAMPLE_POSTS:
            store.seed()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_INFO,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore
    app.add_exception_handler(Exception, global_exception_handler)

    # Health check endpoint
    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with health check."""
        return {
            "message": "Server is running!",
            "status": "healthy",
            "version": settings.PROJECT_VERSION,
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "posts": store.count()}

    # Include app routers
    app.include_router(PostRouter(store, prefix=settings.API_PREFIX).get_router())

    return app


if __name__ == "__main__":
    uvicorn.run(
        "blogapi.main:create_app",
        factory=True,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL,
    )

"""
FastAPI application for the classroom question code service
Teachers publish questions under short codes, students answer them by code
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from classcode.api import router as api_router
from classcode.core import config
from classcode.core.middleware import LoggingMiddleware
from classcode.core.registry import QuestionRegistry
from classcode.core.storage import create_registry

logger = logging.getLogger(__name__)


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATEFMT,
    )


def create_app(registry: Optional[QuestionRegistry] = None) -> FastAPI:
    """Build the application around one registry instance"""
    app = FastAPI(
        title="Classroom Question Codes",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.registry = registry if registry is not None else create_registry()

    app.add_middleware(LoggingMiddleware)

    # CORS middleware for frontend communication
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/health")
    async def health(request: Request):
        """Health check"""
        return {"status": "ok", "questions": len(request.app.state.registry)}

    logger.info(f"Application ready with {len(app.state.registry)} questions")
    return app


app = create_app()

"""FastAPI application for Deliberate Thinking.

Exposes the same submission as the MCP tool plus read-only inspection of the
ledger. The server wrapper is class-based (no global mutable state).

Run with:
- `python -m server --transport http`
- `uvicorn server.app:app --port 8000`
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.requests import Request

from core import DeliberateThinking, __version__
from core.config import Settings
from core.errors import InvalidParameterError, SerializationError
from core.models import ThoughtRequest, ThoughtResponse


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging for the server."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        force=True,
    )
    logging.getLogger("core").setLevel(level)
    logging.getLogger("server").setLevel(level)


logger = logging.getLogger(__name__)


# ============================================================================
# Request/Response Models
# ============================================================================


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Server health status")
    system_ready: bool = Field(..., description="Whether the ledger is ready")


class StatusResponse(BaseModel):
    """Response model for ledger status."""

    active_branch: Optional[str] = Field(None, description="Branch receiving plain and revision steps")
    branch_count: int = Field(..., description="Number of known branches")
    main_length: int = Field(..., description="Number of thoughts on the main timeline")
    history_length: int = Field(..., description="Number of thoughts on the active timeline")


class HistoryResponse(BaseModel):
    """Response model for the active timeline."""

    thoughts: list = Field(..., description="Thoughts on the active timeline, oldest first")
    thought_history_length: int = Field(..., description="Number of thoughts on the active timeline")


class BranchListResponse(BaseModel):
    """Response model for listing branches."""

    branches: list = Field(..., description="Known branch names")
    count: int = Field(..., description="Total number of branches")
    active_branch: Optional[str] = Field(None, description="Currently active branch, if any")


class DeliberateThinkingServer:
    """Encapsulates FastAPI app + DeliberateThinking lifecycle."""

    def __init__(self, *, log_level: int = logging.INFO) -> None:
        configure_logging(log_level)
        self.system: Optional[DeliberateThinking] = None

    @asynccontextmanager
    async def lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        """Lifespan event handler for startup and shutdown."""
        logger.info("=" * 70)
        logger.info("🚀 DELIBERATE THINKING SERVER STARTING")
        logger.info("=" * 70)

        self.system = DeliberateThinking()
        logger.info("✅ Server ready!")

        yield

        logger.info("👋 Server shutting down...")

    def create_app(self) -> FastAPI:
        """Create and configure a FastAPI application instance."""
        app = FastAPI(
            title="Deliberate Thinking API",
            description="Record, revise and branch chains of reasoning steps",
            version=__version__,
            lifespan=self.lifespan,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        def require_system() -> DeliberateThinking:
            if self.system is None:
                raise HTTPException(status_code=503, detail="Ledger not initialized.")
            return self.system

        @app.get("/", tags=["General"])
        async def root() -> dict[str, Any]:
            return {
                "name": "Deliberate Thinking API",
                "version": __version__,
                "docs": "/docs",
                "health": "/health",
                "validEndpoints": [
                    "GET /health",
                    "GET /status",
                    "POST /thoughts",
                    "GET /thoughts",
                    "GET /branches",
                ],
            }

        @app.get("/health", response_model=HealthResponse, tags=["General"])
        async def health_check() -> HealthResponse:
            return HealthResponse(status="healthy", system_ready=self.system is not None)

        @app.get("/status", response_model=StatusResponse, tags=["General"])
        async def get_status() -> StatusResponse:
            system = require_system()
            return StatusResponse(**await system.get_status())

        @app.post("/thoughts", response_model=ThoughtResponse, tags=["Thoughts"])
        async def submit_thought(request: ThoughtRequest) -> Response:
            system = require_system()
            try:
                payload = await system.submit_json(request)
            except InvalidParameterError as e:
                logger.warning(f"⚠️  Rejected thought: {e.message}")
                raise HTTPException(status_code=400, detail=e.message)
            except SerializationError as e:
                logger.error(f"❌ {e.message}")
                raise HTTPException(status_code=500, detail=e.message)
            return Response(content=payload, media_type="application/json")

        @app.get("/thoughts", response_model=HistoryResponse, tags=["Thoughts"])
        async def get_history() -> HistoryResponse:
            system = require_system()
            thoughts = await system.get_history()
            return HistoryResponse(thoughts=thoughts, thought_history_length=len(thoughts))

        @app.get("/branches", response_model=BranchListResponse, tags=["Thoughts"])
        async def list_branches() -> BranchListResponse:
            system = require_system()
            status = await system.get_status()
            branches = await system.list_branches()
            return BranchListResponse(
                branches=branches,
                count=len(branches),
                active_branch=status["active_branch"],
            )

        @app.exception_handler(404)
        async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
            return JSONResponse(
                status_code=404,
                content={
                    "error": "Not Found",
                    "detail": "The requested endpoint does not exist",
                    "docs": "/docs",
                },
            )

        return app


def create_app() -> FastAPI:
    """Factory for creating an app instance (useful for tests/uvicorn)."""
    return DeliberateThinkingServer(log_level=Settings.from_env().logging_level()).create_app()


app = create_app()

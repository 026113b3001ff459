"""Health check routes."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from openai import APIError
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rechart.api.dependencies import ReconcilerDep
from rechart.db.base import get_db
from rechart.llm.client import CompletionError

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    model_config = ConfigDict(populate_by_name=True)

    status: str
    xai_configured: bool = Field(alias="xaiConfigured")
    api_connected: bool = Field(alias="apiConnected")
    available_models: list[str] = Field(alias="availableModels")
    timestamp: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    ready: bool
    checks: dict[str, bool]


@router.get("/health", response_model=HealthResponse)
def health_check(reconciler: ReconcilerDep):
    """Report whether the completion API is configured and reachable."""
    configured = reconciler.config.is_configured
    connected = False
    models: list[str] = []

    if configured:
        try:
            models = reconciler.client.list_models()
            connected = True
        except (CompletionError, APIError, TypeError, ValueError) as e:
            logger.error(f"Error checking API connectivity: {e!r}")

    return HealthResponse(
        status="ok",
        xai_configured=configured,
        api_connected=connected,
        available_models=models,
        timestamp=datetime.utcnow().isoformat(),
    )


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(db: Session = Depends(get_db)):
    """Readiness check with dependency validation."""
    checks = {}

    # Check database
    try:
        db.execute(text("SELECT 1"))
        checks["database"] = True
    except SQLAlchemyError:
        checks["database"] = False

    # All checks must pass
    ready = all(checks.values())

    return ReadinessResponse(
        ready=ready,
        checks=checks,
    )

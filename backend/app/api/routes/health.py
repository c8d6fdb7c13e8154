"""Service Root & Store Probe: GET / description and GET /test-db connectivity check.

Invariants:
    - GET / never touches the store and always returns 200
    - GET /test-db runs one trivial query; an unreachable store is a 500 with detail

Design Decisions:
    - /test-db exposes the driver error text in "detail": it exists to diagnose
      connectivity, so the detail is the point of the endpoint
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import DatabaseError
from app.infrastructure.database import get_db

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])

SERVICE_NAME = "account-service"
SERVICE_VERSION = "1.0.0"

ENDPOINTS = [
    "GET /",
    "GET /test-db",
    "POST /auth/login",
    "POST /auth/register",
    "GET /auth/profile/{username}",
    "PUT /auth/change-password",
    "PUT /auth/reset-password",
    "GET /users",
    "POST /users",
    "GET /users/{id}",
]


class DatabaseCheckResponse(BaseModel):
    success: bool = True
    message: str = "Database connection OK"
    time: datetime


@router.get("/")
async def describe_service():
    """Static description of the service and its routes."""
    return {
        "success": True,
        "message": "Server is running",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": ENDPOINTS,
    }


@router.get("/test-db", response_model=DatabaseCheckResponse)
async def check_database(db: AsyncSession = Depends(get_db)):
    """Confirm the store answers; returns its current time."""
    try:
        result = await db.execute(select(func.now()))
        now = result.scalar_one()
    except SQLAlchemyError as e:
        logger.error(
            f"Database connectivity check failed: {e}",
            extra={"operation": "test_db"},
        )
        raise DatabaseError(
            "Database connection failed", "test_db",
            detail=str(getattr(e, "orig", None) or e),
        ) from e
    return DatabaseCheckResponse(time=now)

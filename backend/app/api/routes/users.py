"""Example User Routes: list, create and fetch GenericUser rows.

Invariants:
    - GET /users returns every row, newest id first
    - POST /users forwards name/email without validation; a rejected insert is a 500
    - GET /users/{id} answers 404 for an unknown id
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import get_db, store_errors
from app.schemas.users import (
    UserCreate, UserListResponse, UserRecord, UserResponse,
)
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def list_users(db: AsyncSession = Depends(get_db)):
    async with store_errors("Error fetching users", "list_users"):
        users = await UserStore(db).list_all()
    return UserListResponse(
        users=[UserRecord.model_validate(u) for u in users],
    )


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    async with store_errors("Error creating user", "create_user"):
        user = await UserStore(db).create(body.name, body.email)
    logger.info(f"User {user.id} created")
    return UserResponse(user=UserRecord.model_validate(user))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    async with store_errors("Error fetching user", "get_user"):
        user = await UserStore(db).get(user_id)
    if user is None:
        raise ResourceNotFoundError("User not found")
    return UserResponse(user=UserRecord.model_validate(user))

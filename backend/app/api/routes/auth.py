"""Auth Routes: login, registration, profile and password management.

Invariants:
    - Request bodies validated by schemas/auth.py before any store access
    - Unknown username and wrong password produce the same 401 envelope
    - Inactive accounts: 401 on login/change-password, 404 on profile/reset-password
    - Password values never reach the logs
    - Store failures become 500 envelopes with a route-specific message

Design Decisions:
    - No token or cookie is issued on login; the response body is the whole result
    - Registration keeps the pre-check before insert: 409 on a detected duplicate,
      otherwise insert (a concurrent duplicate fails on the unique constraint as a 500)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.credentials import password_matches
from app.core.errors import (
    AccountDisabledError, ConflictError, CurrentPasswordMismatchError,
    DatabaseError, InvalidCredentialsError, ResourceNotFoundError,
)
from app.infrastructure.database import get_db, store_errors
from app.schemas.auth import (
    AccountProfile, AccountPublic, AccountRef,
    ChangePasswordRequest, ChangePasswordResponse,
    LoginRequest, LoginResponse,
    ProfileResponse,
    RegisterRequest, RegisterResponse,
    ResetPasswordRequest, ResetPasswordResponse,
)
from app.services.account_store import AccountStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Check username and password; stamp last_login on success."""
    store = AccountStore(db)
    async with store_errors("Internal server error", "login"):
        account = await store.find_by_username(body.username)
        if account is None:
            logger.info("Login rejected: unknown username")
            raise InvalidCredentialsError()
        if not account.is_active:
            logger.info(
                "Login rejected: account disabled",
                extra={"account_id": account.id},
            )
            raise AccountDisabledError()
        if not password_matches(account.password, body.password):
            logger.info(
                "Login rejected: wrong password",
                extra={"account_id": account.id},
            )
            raise InvalidCredentialsError()
        await store.record_login(account.id)

    logger.info("Login succeeded", extra={"account_id": account.id})
    return LoginResponse(user=AccountPublic.model_validate(account))


@router.post(
    "/register", response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Create an active account unless the username or email is taken."""
    store = AccountStore(db)
    async with store_errors("Error registering user", "register"):
        if await store.username_or_email_taken(body.username, body.email):
            raise ConflictError("Username or email already exists")
        account = await store.create(
            username=body.username,
            password=body.password,
            name=body.name,
            email=body.email,
        )

    logger.info(
        "Account registered",
        extra={"account_id": account.id, "username": account.username},
    )
    return RegisterResponse(user=AccountPublic.model_validate(account))


@router.get("/profile/{username}", response_model=ProfileResponse)
async def get_profile(username: str, db: AsyncSession = Depends(get_db)):
    """Public profile of an active account."""
    async with store_errors("Error fetching user profile", "profile"):
        account = await AccountStore(db).find_active_by_username(username)
    if account is None:
        raise ResourceNotFoundError("User not found")
    return ProfileResponse(user=AccountProfile.model_validate(account))


@router.put("/change-password", response_model=ChangePasswordResponse)
async def change_password(
    body: ChangePasswordRequest, db: AsyncSession = Depends(get_db),
):
    """Set a new password; verifies currentPassword only when it is supplied."""
    store = AccountStore(db)
    async with store_errors("Internal server error", "change_password"):
        account = await store.find_by_id(body.user_id)
        if account is None:
            raise ResourceNotFoundError("User not found")
        if not account.is_active:
            raise AccountDisabledError()
        if body.current_password and not password_matches(
            account.password, body.current_password,
        ):
            logger.info(
                "Password change rejected: current password mismatch",
                extra={"account_id": account.id},
            )
            raise CurrentPasswordMismatchError()
        username = await store.set_password(account.id, body.new_password)

    if username is None:
        raise DatabaseError("Error updating password", "change_password")
    logger.info("Password changed", extra={"account_id": account.id})
    return ChangePasswordResponse(username=username)


@router.put("/reset-password", response_model=ResetPasswordResponse)
async def reset_password(
    body: ResetPasswordRequest, db: AsyncSession = Depends(get_db),
):
    """Overwrite the password of an active account, no current-password check."""
    async with store_errors("Internal server error", "reset_password"):
        updated = await AccountStore(db).reset_password_if_active(
            body.user_id, body.new_password,
        )
    if updated is None:
        raise ResourceNotFoundError("User not found or disabled")
    account_id, username = updated
    logger.info("Password reset", extra={"account_id": account_id})
    return ResetPasswordResponse(user=AccountRef(id=account_id, username=username))

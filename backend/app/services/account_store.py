"""Account Store: the SQL behind every /auth route.

Invariants:
    - One method per statement; no method opens its own transaction beyond the
      request session, and write methods commit before returning
    - reset_password is a single UPDATE filtered on is_active (no separate read)
    - Passwords are written exactly as supplied (see core/credentials.py)

Design Decisions:
    - username_or_email_taken then create is a read-then-write sequence with no lock;
      a concurrent duplicate slips past the check and fails on the unique constraint
"""

from datetime import datetime, timezone

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.login_account import LoginAccount


class AccountStore:
    """Persistence for LoginAccount rows, bound to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_username(self, username: str) -> LoginAccount | None:
        result = await self.db.execute(
            select(LoginAccount).where(LoginAccount.username == username),
        )
        return result.scalar_one_or_none()

    async def find_active_by_username(self, username: str) -> LoginAccount | None:
        result = await self.db.execute(
            select(LoginAccount)
            .where(LoginAccount.username == username)
            .where(LoginAccount.is_active.is_(True)),
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, account_id: int) -> LoginAccount | None:
        result = await self.db.execute(
            select(LoginAccount).where(LoginAccount.id == account_id),
        )
        return result.scalar_one_or_none()

    async def username_or_email_taken(
        self, username: str, email: str | None,
    ) -> bool:
        """True when any row (active or not) holds the username or the email."""
        conditions = [LoginAccount.username == username]
        if email is not None:
            conditions.append(LoginAccount.email == email)
        result = await self.db.execute(
            select(LoginAccount.id).where(or_(*conditions)).limit(1),
        )
        return result.first() is not None

    async def create(
        self, username: str, password: str, name: str, email: str | None,
    ) -> LoginAccount:
        account = LoginAccount(
            username=username, password=password, name=name, email=email,
        )
        self.db.add(account)
        await self.db.commit()
        await self.db.refresh(account)
        return account

    async def record_login(self, account_id: int) -> None:
        await self.db.execute(
            update(LoginAccount)
            .where(LoginAccount.id == account_id)
            .values(last_login=datetime.now(timezone.utc)),
        )
        await self.db.commit()

    async def set_password(self, account_id: int, password: str) -> str | None:
        """Update password; returns the username, or None when no row matched."""
        result = await self.db.execute(
            update(LoginAccount)
            .where(LoginAccount.id == account_id)
            .values(password=password, updated_at=datetime.now(timezone.utc))
            .returning(LoginAccount.username),
        )
        username = result.scalar_one_or_none()
        await self.db.commit()
        return username

    async def reset_password_if_active(
        self, account_id: int, password: str,
    ) -> tuple[int, str] | None:
        """Update password of an active account; returns (id, username) or None."""
        result = await self.db.execute(
            update(LoginAccount)
            .where(LoginAccount.id == account_id)
            .where(LoginAccount.is_active.is_(True))
            .values(password=password, updated_at=datetime.now(timezone.utc))
            .returning(LoginAccount.id, LoginAccount.username),
        )
        row = result.first()
        await self.db.commit()
        if row is None:
            return None
        return row.id, row.username

"""LoginAccount ORM: the authentication-bearing account record.

Invariants:
    - id is an integer primary key generated by the store
    - username and email are unique across active and inactive rows
    - password is stored as supplied (plain text, see core/credentials.py)
    - rows are never hard-deleted; is_active=false is the only way to retire one

Design Decisions:
    - email nullable: registration treats it as optional; NULLs never collide
    - Timestamps set from Python (timezone-aware UTC) so every dialect agrees
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text, true
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LoginAccount(Base):
    """Account that can log in with username and password."""
    __tablename__ = "users_login"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str | None] = mapped_column(
        String(255), nullable=True, unique=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=true(),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    last_login: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

"""User Store: the SQL behind the example /users routes.

Invariants:
    - list_all orders by id descending (newest first)
    - create stamps created_at; nothing else about the row is checked
"""

from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.generic_user import GenericUser


class UserStore:
    """Persistence for GenericUser rows, bound to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[GenericUser]:
        result = await self.db.execute(
            select(GenericUser).order_by(GenericUser.id.desc()),
        )
        return list(result.scalars().all())

    async def get(self, user_id: int) -> GenericUser | None:
        return await self.db.get(GenericUser, user_id)

    async def create(self, name: Any, email: Any) -> GenericUser:
        user = GenericUser(name=name, email=email)
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

"""Generic User Schemas: example CRUD records.

Invariants:
    - UserCreate performs no validation: whatever the client sends is handed to the
      store, and the store's constraints decide (a rejected insert is a 500)
    - Any JSON value is accepted for name/email; the store coerces or rejects it
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    name: Any = None
    email: Any = None


class UserRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime


class UserListResponse(BaseModel):
    success: bool = True
    users: list[UserRecord]


class UserResponse(BaseModel):
    success: bool = True
    user: UserRecord

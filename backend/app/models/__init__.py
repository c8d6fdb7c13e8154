"""ORM Models: SQLAlchemy declarative models for both stored entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - LoginAccount and GenericUser are independent tables

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all and Alembic
"""

from app.models.login_account import LoginAccount  # noqa: F401
from app.models.generic_user import GenericUser  # noqa: F401

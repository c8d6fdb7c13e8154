"""Pydantic Schemas: request/response records for every route.

Invariants:
    - Request records check field presence before any store access
    - Contract violations raise PydanticCustomError with type REQUEST_CONTRACT_ERROR,
      whose message the 400 handler returns verbatim

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

REQUEST_CONTRACT_ERROR = "request_contract"

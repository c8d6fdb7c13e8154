"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter
    - Routes validate, call one store, and build the envelope; SQL lives in services/
"""

"""Infrastructure Layer: database pool and logging setup.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Store failures leave this layer as DatabaseError (core/errors.py)
"""

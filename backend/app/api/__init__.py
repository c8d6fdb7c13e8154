"""API Layer: FastAPI routers and error handlers.

Invariants:
    - Routers registered explicitly in main.py (no auto-discovery)
    - Every response body is a JSON object carrying a success flag
"""

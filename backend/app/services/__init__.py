"""Services Layer: store classes issuing the SQL for each route.

Invariants:
    - Stores take the request's AsyncSession; they never create sessions themselves
    - Stores raise SQLAlchemy errors unchanged; routes decide the client message
"""

"""Account Service Application Package: login accounts and example users over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

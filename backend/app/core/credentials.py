"""Credential Rules: password policy and comparison, pure functions.

Invariants:
    - Passwords shorter than MIN_PASSWORD_LENGTH are rejected by every password-setting route
    - Comparison is exact string equality

Design Decisions:
    - Plain-text storage and equality comparison is a KNOWN SECURITY DEFECT kept for
      behavioral parity with existing data. Hashing changes the stored format and is a
      product decision; it must be done as a data migration, not inside this function.
"""

MIN_PASSWORD_LENGTH = 6


def password_matches(stored: str, supplied: str) -> bool:
    """Return True when the supplied password equals the stored one."""
    return stored == supplied


def password_too_short(password: str) -> bool:
    return len(password) < MIN_PASSWORD_LENGTH

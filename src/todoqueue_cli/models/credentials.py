"""Credential comparison.

Passwords are stored as given. Every check goes through ``verify_password``
so that a hashing scheme can later be swapped in here without touching the
callers.
"""

import secrets


def verify_password(stored: str, candidate: str) -> bool:
    """Return True when *candidate* matches the stored credential exactly."""
    return secrets.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))

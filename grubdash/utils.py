"""Identifier generation."""

import uuid


def next_id() -> str:
    """Return a new random 32-character hex identifier."""
    return uuid.uuid4().hex

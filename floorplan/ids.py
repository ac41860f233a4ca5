"""Element id generation."""

from __future__ import annotations
import itertools
import uuid

_counter = itertools.count(1)


def new_id(prefix: str) -> str:
    """Return an id like ``w-12-a3f9``: prefix, process-wide counter, random suffix."""
    return f"{prefix}-{next(_counter)}-{uuid.uuid4().hex[:4]}"

from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque record id."""
    return uuid.uuid4().hex

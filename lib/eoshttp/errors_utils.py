from __future__ import annotations

import json


def parse_error_message(body: bytes | None) -> str | None:
    """Best-effort lookup of the ``message`` field in a JSON error body."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except Exception:
        return None
    if not isinstance(data, dict):
        return None
    message = data.get("message")
    return message if isinstance(message, str) else None

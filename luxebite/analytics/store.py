from __future__ import annotations

import time
from typing import Any

_events: list[dict[str, Any]] = []


def record_chat(intent: str, message: str, recommendation_ids: list[str]) -> None:
    """Log one concierge exchange. Only the message length is kept, never the text."""
    _events.append({
        "type": "concierge_chat",
        "timestamp": time.time(),
        "intent": intent,
        "message_length": len(message),
        "recommendation_ids": list(recommendation_ids),
    })


def get_events() -> list[dict[str, Any]]:
    return _events


def clear_events() -> None:
    _events.clear()

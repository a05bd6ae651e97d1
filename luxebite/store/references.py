from __future__ import annotations

import random
from datetime import datetime


def reference_number(prefix: str, now: datetime) -> str:
    """Human-facing booking reference, e.g. ``ORD-482913047``.

    Last six digits of the epoch-millisecond timestamp followed by three
    random digits.
    """
    millis = str(int(now.timestamp() * 1000))[-6:]
    return f"{prefix}-{millis}{random.randint(0, 999):03d}"

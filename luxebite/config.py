from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    session_secret: str = os.getenv("SESSION_SECRET", "luxe-bite-secret-change-in-production")
    timezone: str = os.getenv("RESTAURANT_TIMEZONE", "Asia/Colombo")
    # Whole dollars, the same unit as menu prices
    delivery_fee: int = int(os.getenv("DELIVERY_FEE", "15"))
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@luxebite.com")
    admin_password: str = os.getenv("ADMIN_PASSWORD", "admin123")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


DEFAULT_APP_CONFIG = AppConfig()

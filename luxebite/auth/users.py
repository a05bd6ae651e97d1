from __future__ import annotations

from typing import Any

import bcrypt

from ..config import DEFAULT_APP_CONFIG, AppConfig

_users: dict[str, dict[str, Any]] = {}


def _hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def _verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


def seed_users(config: AppConfig = DEFAULT_APP_CONFIG) -> None:
    """Seed the staff admin account and a demo customer."""
    _users.clear()
    _users[config.admin_email.lower()] = {
        "password_hash": _hash_password(config.admin_password),
        "role": "admin",
    }
    _users["guest@luxebite.com"] = {
        "password_hash": _hash_password("guest123"),
        "role": "customer",
    }


def authenticate(email: str, password: str) -> dict[str, Any] | None:
    """Verify credentials. Returns ``{email, role}`` or ``None``."""
    record = _users.get(email.strip().lower())
    if record and _verify_password(password, record["password_hash"]):
        return {"email": email.strip().lower(), "role": record["role"]}
    return None


seed_users()

"""
Environment-driven settings.

Every value is read lazily so tests (and a restarted worker) pick up the
current environment. Malformed numbers fall back to their defaults.
"""

from __future__ import annotations

import os
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

DEFAULT_JWT_SECRET = "dev-change-this-secret-before-deploying"
DEFAULT_CORS_ORIGINS = ("http://localhost:5173", "http://127.0.0.1:5173")


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


def database_url() -> str:
    """
    DATABASE_URL without libpq-only query options (asyncpg rejects `sslmode`).
    """
    url = env_str("DATABASE_URL")
    parts = urlsplit(url)
    if not parts.query:
        return url
    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(params), parts.fragment))


def db_pool_min_size() -> int:
    return max(env_int("DB_POOL_MIN_SIZE", 1), 1)


def db_pool_max_size() -> int:
    return max(env_int("DB_POOL_MAX_SIZE", 5), db_pool_min_size())


def db_auto_schema() -> bool:
    return env_bool("DB_AUTO_SCHEMA", True)


def jwt_secret() -> str:
    # In production, set JWT_SECRET in environment.
    return env_str("JWT_SECRET", DEFAULT_JWT_SECRET)


def jwt_algorithm() -> str:
    return env_str("JWT_ALG", "HS256")


def access_token_expire_minutes() -> int:
    return env_int("ACCESS_TOKEN_EXPIRE_MIN", 60)


def bcrypt_rounds() -> int:
    return min(max(env_int("BCRYPT_ROUNDS", 12), 4), 31)


def default_member_password() -> str:
    """
    Placeholder secret given to players/admins created by an admin.

    Owners are expected to change it out of band.
    """
    return env_str("DEFAULT_MEMBER_PASSWORD", "password")


def bootstrap_admin() -> tuple[str, str] | None:
    username = env_str("BOOTSTRAP_ADMIN_USERNAME")
    password = env_str("BOOTSTRAP_ADMIN_PASSWORD")
    if not username or not password:
        return None
    return username, password


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]

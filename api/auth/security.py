"""
Password hashing (bcrypt) and bearer access tokens (HS256 JWT).

Tokens carry the credential id as `sub`. The role claim is informational:
access decisions always re-read the stored credential.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import bcrypt
import jwt

from core import settings

TOKEN_TYPE = "access"


class AuthSecurityError(RuntimeError):
    pass


@dataclass(frozen=True)
class AccessClaims:
    user_id: int
    username: str
    role: str
    expires_at: int


def hash_password(plain_password: str) -> str:
    secret = (plain_password or "").encode("utf-8")
    if not secret:
        raise AuthSecurityError("Password is empty.")
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds())
    return bcrypt.hashpw(secret, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    secret = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not secret or not hashed:
        return False
    try:
        return bcrypt.checkpw(secret, hashed)
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def build_access_token(*, user_id: int, username: str, role: str) -> str:
    issued_at = int(time.time())
    claims = {
        "sub": str(user_id),
        "username": username,
        "role": role,
        "type": TOKEN_TYPE,
        "iat": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes() * 60,
    }
    return jwt.encode(claims, settings.jwt_secret(), algorithm=settings.jwt_algorithm())


def decode_access_token(token: str) -> AccessClaims:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        payload = jwt.decode(
            raw,
            settings.jwt_secret(),
            algorithms=[settings.jwt_algorithm()],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Access token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc

    if payload.get("type") != TOKEN_TYPE:
        raise AuthSecurityError("Token is not an access token.")

    subject = str(payload["sub"]).strip()
    if not subject.isdigit():
        raise AuthSecurityError("Invalid access token subject.")

    return AccessClaims(
        user_id=int(subject),
        username=str(payload.get("username") or ""),
        role=str(payload.get("role") or ""),
        expires_at=int(payload["exp"]),
    )

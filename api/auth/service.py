"""
Auth business logic: login, token resolution and credential issuance.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import settings

from . import mapper, repository, schemas, security

logger = logging.getLogger(__name__)


async def login(payload: schemas.LoginRequest) -> schemas.TokenResponse:
    user_row = await repository.get_user_by_username(payload.username)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )

    is_valid = security.verify_password(payload.password, str(user_row.get("password_hash") or ""))
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
        )

    access_token = security.build_access_token(
        user_id=int(user_row["id"]),
        username=str(user_row["username"]),
        role=str(user_row["role"]),
    )
    return schemas.TokenResponse(
        access_token=access_token,
        expires_in=settings.access_token_expire_minutes() * 60,
    )


async def get_user_from_access_token(access_token: str) -> dict:
    try:
        claims = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    # The role always comes from the stored credential, not from the token.
    user_row = await repository.get_user_by_id(claims.user_id)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found.",
        )
    return user_row


def me(user_row: dict) -> schemas.UserResponse:
    return mapper.to_user_response(user_row)


async def issue_credentials(
    *,
    username: str,
    password: str,
    role: schemas.Role,
    player_id: int | None = None,
    admin_id: int | None = None,
) -> dict:
    """
    Create the single credential record linked to a freshly created player or admin.
    """
    user_row = await repository.create_user(
        username=username,
        password_hash=security.hash_password(password),
        role=role.value,
        player_id=player_id,
        admin_id=admin_id,
    )
    logger.info("Issued %s credentials for %r (user id %s).", role.value, username, user_row["id"])
    return user_row


async def revoke_credentials(kind: str, member_id: int) -> bool:
    """
    Detach and delete the credential linked to a player/admin.

    Runs as separate statements: a failure between them can leave a detached
    credential behind.
    """
    user_row = await repository.get_user_for_member(kind, member_id)
    if user_row is None:
        logger.warning("No credentials linked to %s %s.", kind, member_id)
        return False

    user_id = int(user_row["id"])
    await repository.detach_user(user_id)
    await repository.delete_user(user_id)
    logger.info("Revoked credentials %r for %s %s.", user_row["username"], kind, member_id)
    return True

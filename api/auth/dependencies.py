"""
Request-scoped auth dependencies: bearer token in, credential row out.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from . import service

# Publishes the bearer scheme in the OpenAPI document; errors are raised below.
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an `Authorization: Bearer <token>` header value.
    """
    scheme, _, token = (authorization or "").strip().partition(" ")
    if not scheme:
        raise _unauthorized("Missing Authorization header.")
    if scheme.lower() != "bearer" or not token.strip():
        raise _unauthorized("Authorization must be: Bearer <token>.")
    return token.strip()


async def get_bearer_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    if credentials is None:
        # Missing or non-bearer header.
        return extract_bearer_token(request.headers.get("Authorization"))
    return extract_bearer_token(f"{credentials.scheme} {credentials.credentials}")


async def get_current_user(access_token: str = Depends(get_bearer_token)) -> dict:
    return await service.get_user_from_access_token(access_token)

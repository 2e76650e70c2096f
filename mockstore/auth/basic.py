# mockstore/auth/basic.py
from __future__ import annotations

from typing import Callable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from ..config import settings
from ..errors import ApiError, ErrorKind
from ..models.store import User
from .credentials import CredentialStore

_basic = HTTPBasic(auto_error=False)

_CHALLENGE = {"WWW-Authenticate": "Basic"}


def _unauthorized(message: str) -> ApiError:
    return ApiError(401, ErrorKind.AUTHENTICATION_REQUIRED, message, headers=_CHALLENGE, status="fail")


def get_credential_store(request: Request) -> CredentialStore:
    return request.app.state.credentials


async def current_user(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(_basic),
) -> Optional[User]:
    """Resolves the Basic-auth user; a no-op returning None while AUTH_ENABLED is off."""
    if not settings.AUTH_ENABLED:
        return None
    if request.headers.get("authorization") is None:
        raise _unauthorized("Authorization header is required")
    if credentials is None:
        raise _unauthorized("Basic authentication required")
    if not credentials.username or not credentials.password:
        raise _unauthorized("Username and password are required")

    user = get_credential_store(request).verify(credentials.username, credentials.password)
    if user is None:
        raise _unauthorized("Invalid username or password")
    request.state.user = user
    return user


def require_role(role: str) -> Callable:
    async def _dependency(user: Optional[User] = Depends(current_user)) -> Optional[User]:
        if settings.AUTH_ENABLED and (user is None or user.role != role):
            raise ApiError(403, ErrorKind.ACCESS_DENIED, f"Access denied. {role} role required", status="fail")
        return user

    return _dependency

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from ..auth.basic import get_credential_store
from ..auth.credentials import CredentialStore
from ..config import settings
from ..errors import ApiError, ErrorKind
from ..models.store import LoginRequest
from ..responses import envelope

router = APIRouter(prefix=f"{settings.API_PREFIX}/auth", tags=["auth"], default_response_class=ORJSONResponse)


@router.post("/login")
async def login(body: Optional[LoginRequest] = None, store: CredentialStore = Depends(get_credential_store)):
    """Checks a username/password pair against the credential store."""
    if body is None or not body.username or not body.password:
        raise ApiError(400, ErrorKind.MISSING_CREDENTIALS, "Username and password are required", status="fail")

    user = store.verify(body.username, body.password)
    if user is None:
        raise ApiError(401, ErrorKind.AUTHENTICATION_REQUIRED, "Invalid username or password", status="fail")

    return envelope({"status": "success", "message": "Login successful", "user": user.public()})

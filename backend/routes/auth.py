from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

import auth
import store

router = APIRouter(prefix="/api", tags=["auth"])


# ---------- Request / Response schemas ----------

class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    session_id: str = Field(alias="sessionId")
    username: str


class ChangePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_password: Optional[str] = Field(default=None, alias="currentPassword")
    new_password: Optional[str] = Field(default=None, alias="newPassword")


class SuccessResponse(BaseModel):
    success: bool


class MessageResponse(BaseModel):
    success: bool
    message: Optional[str] = None


# ---------- Endpoints ----------

@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest):
    """
    Checks the admin credentials and opens a session.
    The returned sessionId goes in the X-Session-ID header of later calls.
    """
    return await auth.login(store.database, store.sessions, body.username, body.password)


@router.get("/auth/status")
async def auth_status(request: Request):
    return auth.auth_status(store.sessions, auth.session_token(request))


@router.get("/check-auth")
async def check_auth(request: Request):
    """Alias of /api/auth/status kept for older admin pages."""
    return auth.auth_status(store.sessions, auth.session_token(request))


@router.post("/logout", response_model=SuccessResponse)
async def logout(request: Request):
    return auth.logout(store.sessions, auth.session_token(request))


@router.post("/change-password", response_model=MessageResponse)
async def change_password(body: ChangePasswordRequest, request: Request):
    """
    Replaces the admin password. Every open session is dropped on success,
    so the client has to log in again with the new password.
    """
    return await auth.change_password(
        store.database,
        store.sessions,
        auth.session_token(request),
        body.current_password,
        body.new_password,
    )

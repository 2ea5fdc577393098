"""
Admin authentication.

There is exactly one principal: username "admin", password stored in the
admin_config row (id = 1). A successful login hands out a session token that
the client sends back in the X-Session-ID header (or a "session" cookie).
Changing the password logs every session out.
"""

import logging
from typing import Optional

from fastapi import Request

import config
import store
from errors import InvalidCredentials, MissingField, StorageFailure, Unauthenticated, WeakPassword
from models.admin_config import AdminConfig
from models.session import Session
from storage.base import Storage
from storage.schema import utc_timestamp

logger = logging.getLogger(__name__)


async def get_admin_password(storage: Storage) -> str:
    """Stored admin password, or the configured default if it can't be read."""
    try:
        row = await storage.first("SELECT * FROM admin_config WHERE id = 1")
    except StorageFailure:
        logger.warning("Could not read admin_config, using default password")
        return config.DEFAULT_ADMIN_PASSWORD
    if row and row.get("password"):
        return AdminConfig(**row).password
    return config.DEFAULT_ADMIN_PASSWORD


async def login(storage: Storage, sessions: store.SessionStore, username: Optional[str], password: Optional[str]) -> dict:
    if not username or not password:
        raise MissingField("Username and password are required")

    stored = await get_admin_password(storage)
    if username != config.ADMIN_USERNAME or password != stored:
        raise InvalidCredentials("Invalid username or password")

    sessions.purge_expired()
    token = sessions.create(username)
    logger.info("Admin %s logged in", username)
    return {"success": True, "sessionId": token, "username": username}


async def change_password(
    storage: Storage,
    sessions: store.SessionStore,
    token: Optional[str],
    current_password: Optional[str],
    new_password: Optional[str],
) -> dict:
    if sessions.validate(token) is None:
        raise Unauthenticated()

    if not current_password or not new_password:
        raise MissingField("Current and new password are required")
    if len(new_password) < config.MIN_PASSWORD_LENGTH:
        raise WeakPassword(f"New password must be at least {config.MIN_PASSWORD_LENGTH} characters")

    if current_password != await get_admin_password(storage):
        raise InvalidCredentials("Current password is incorrect")

    await storage.execute(
        "INSERT OR REPLACE INTO admin_config (id, password, updated_at) VALUES (1, ?, ?)",
        (new_password, utc_timestamp()),
    )
    sessions.clear_all()
    logger.info("Admin password changed; all sessions cleared")
    return {"success": True, "message": "Password changed, please log in again"}


def logout(sessions: store.SessionStore, token: Optional[str]) -> dict:
    sessions.invalidate(token)
    return {"success": True}


def auth_status(sessions: store.SessionStore, token: Optional[str]) -> dict:
    session = sessions.validate(token)
    if session is None:
        return {"authenticated": False}
    return {
        "authenticated": True,
        "username": session.username,
        "user": {"username": session.username},
    }


# ---------- FastAPI helpers ----------

def session_token(request: Request) -> Optional[str]:
    """Token from the X-Session-ID header, falling back to the session cookie."""
    return request.headers.get(config.SESSION_HEADER) or request.cookies.get(config.SESSION_COOKIE)


async def require_session(request: Request) -> Session:
    """Dependency for admin-only routes."""
    token = session_token(request)
    if not token:
        raise Unauthenticated()
    session = store.sessions.validate(token)
    if session is None:
        raise Unauthenticated("Session expired or invalid")
    return session

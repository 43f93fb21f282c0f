"""Customer session endpoints and utilities.

Identity itself is verified by the external identity provider; this module
only keeps the session boundary the rest of the API relies on.
"""
import logging
from fastapi import APIRouter, Request, Response, HTTPException
from pydantic import BaseModel, Field
from typing import Optional
import secrets
from datetime import datetime, timedelta

from order_assistant.core.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)

# In-memory session storage (use Redis in production)
_sessions: dict[str, dict] = {}

SESSION_COOKIE = "session_token"


class LoginRequest(BaseModel):
    """Login request model."""
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SessionInfo(BaseModel):
    """Session information response."""
    authenticated: bool
    email: Optional[str] = None
    expires_at: Optional[str] = None


def create_session_token() -> str:
    """Generate a secure session token."""
    return secrets.token_urlsafe(32)


def create_session(response: Response, email: str) -> str:
    """Create a new session for the customer and set cookie."""
    session_token = create_session_token()
    expires_at = datetime.utcnow() + timedelta(hours=settings.session_ttl_hours)

    _sessions[session_token] = {
        "email": email.strip().lower(),
        "expires_at": expires_at,
        "created_at": datetime.utcnow(),
    }

    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_token,
        httponly=True,
        max_age=settings.session_ttl_hours * 3600,
        samesite="lax",
    )

    return session_token


def get_session_token(request: Request) -> Optional[str]:
    """Extract session token from cookie."""
    return request.cookies.get(SESSION_COOKIE)


def get_session(session_token: Optional[str]) -> Optional[dict]:
    """Get a live session, dropping it if expired."""
    if not session_token:
        return None

    session = _sessions.get(session_token)
    if not session:
        return None

    if datetime.utcnow() > session["expires_at"]:
        del _sessions[session_token]
        return None

    return session


async def require_customer(request: Request) -> str:
    """Dependency returning the signed-in customer's email."""
    session = get_session(get_session_token(request))
    if session is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return session["email"]


@router.post("/api/auth/login")
async def login(login_req: LoginRequest, response: Response):
    """Start a customer session."""
    session_token = create_session(response, login_req.email)
    session = _sessions[session_token]
    logger.info(f"[AUTH] Session created for {session['email']}")

    return {
        "success": True,
        "message": "Login successful",
        "expires_at": session["expires_at"].isoformat(),
    }


@router.post("/api/auth/logout")
async def logout(request: Request, response: Response):
    """Logout endpoint."""
    session_token = get_session_token(request)
    if session_token and session_token in _sessions:
        del _sessions[session_token]

    response.delete_cookie(SESSION_COOKIE)

    return {"success": True, "message": "Logged out"}


@router.get("/api/auth/session")
async def get_session_info(request: Request) -> SessionInfo:
    """Get current session information."""
    session = get_session(get_session_token(request))

    if session is not None:
        return SessionInfo(
            authenticated=True,
            email=session["email"],
            expires_at=session["expires_at"].isoformat(),
        )

    return SessionInfo(authenticated=False)

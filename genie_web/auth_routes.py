"""
FastAPI routes for authentication.

Prefix: /api/auth
"""

from typing import Optional

from fastapi import APIRouter, Depends, status
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from genie.auth.service import AuthService
from genie.auth.session import AuthSession
from genie.models.user import PublicUser
from .auth_deps import get_auth_service, get_current_session


router = APIRouter(prefix="/api/auth", tags=["auth"])


class Credentials(BaseModel):
    email: str
    password: str


class GoogleAuthRequest(BaseModel):
    token: str = Field(min_length=1)  # Google OAuth access token from the browser


class MessageResponse(BaseModel):
    message: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: PublicUser
    redirect_url: Optional[str] = None


def _auth_response(message: str, session: AuthSession) -> AuthResponse:
    return AuthResponse(
        message=message,
        token=session.token,
        user=session.user,
        redirect_url=session.redirect_url,
    )


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    body: Credentials,
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Register a password account.

    Request (JSON): {"email": "...", "password": "..."}
    Response: 201 {"message": "User created successfully"}
    """
    await run_in_threadpool(auth_service.signup, body.email, body.password)
    return MessageResponse(message="User created successfully")


@router.post("/login", response_model=AuthResponse)
async def login(
    body: Credentials,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Log in with email and password.

    Response:
        {
          "message": "Login successful",
          "token": "<jwt>",
          "user": {"id": "...", "email": "...", "role": "user", ...},
          "redirect_url": "/blueprint"
        }
    """
    session = await run_in_threadpool(auth_service.login, body.email, body.password)
    return _auth_response("Login successful", session)


@router.post("/google", response_model=AuthResponse)
async def google_auth(
    body: GoogleAuthRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Sign in with Google; the account is created on first use."""
    session = await run_in_threadpool(auth_service.google_login, body.token)
    return _auth_response("Google authentication successful", session)


@router.get("/me", response_model=PublicUser)
async def me(session: AuthSession = Depends(get_current_session)) -> PublicUser:
    """Return the user behind the bearer token."""
    return session.user

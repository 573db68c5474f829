"""
FastAPI dependencies for authentication and authorization.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.concurrency import run_in_threadpool

from genie.auth.service import AuthService
from genie.auth.session import AuthSession
from genie.models.user import Principal, Role
from genie.utils.exceptions import InvalidToken, PermissionDenied


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_bearer_token(request: Request) -> Optional[str]:
    """Extract the JWT from an Authorization: Bearer <token> header"""
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None
    if auth_header.lower().startswith("bearer "):
        return auth_header[7:].strip() or None
    return None


async def get_current_session(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthSession:
    """Dependency for protected routes; 401 when the token is missing or invalid"""
    token = get_bearer_token(request)
    if not token:
        raise InvalidToken("Not authenticated")
    return await run_in_threadpool(auth_service.restore, token)


async def get_current_principal(
    session: AuthSession = Depends(get_current_session),
) -> Principal:
    return session.principal


def require_role(*roles: Role):
    """Dependency factory for role-based access control"""
    async def role_checker(session: AuthSession = Depends(get_current_session)) -> Principal:
        if not session.allows(roles):
            raise PermissionDenied()
        return session.principal

    return role_checker


require_admin = require_role(Role.ADMIN)

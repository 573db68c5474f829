"""
Explicit authentication session handle.

The auth service hands one of these back from login/google_login/restore;
callers keep it and pass it along instead of reading shared global state.
"""

from datetime import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from ..models.user import Principal, PublicUser, Role

ADMIN_LANDING_PATH = "/samples"
USER_LANDING_PATH = "/blueprint"


def landing_path(role: Role) -> str:
    """Where a freshly signed-in principal is sent."""
    return ADMIN_LANDING_PATH if role == Role.ADMIN else USER_LANDING_PATH


class AuthSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: Optional[str] = None
    user: Optional[PublicUser] = None
    expires_at: Optional[datetime] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and self.user is not None

    @property
    def is_admin(self) -> bool:
        return self.is_authenticated and self.user.role == Role.ADMIN

    def allows(self, roles: Optional[Iterable[Role]] = None) -> bool:
        """Route guard: authenticated, and holding one of roles when given."""
        if not self.is_authenticated:
            return False
        if roles is None:
            return True
        return self.user.role in set(roles)

    @property
    def principal(self) -> Optional[Principal]:
        if not self.is_authenticated:
            return None
        return Principal(
            email=self.user.email,
            role=self.user.role,
            user_id=self.user.id,
            name=self.user.name,
            picture=self.user.picture,
        )

    @property
    def redirect_url(self) -> Optional[str]:
        if not self.is_authenticated:
            return None
        return landing_path(self.user.role)


ANONYMOUS = AuthSession()

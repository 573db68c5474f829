"""
Authentication service layer.

Wires the pure decision rules to their collaborators:
- bcrypt password hashes
- JSON-backed user records (UserStore)
- Google userinfo exchange for sign-in with Google
- signed JWTs valid for 24 hours

Every successful login returns an AuthSession. Tokens are stateless, so
logging out only drops the caller's handle.
"""

import secrets
from datetime import datetime, timezone
from typing import Callable, Optional

try:
    import bcrypt
except ImportError:  # pragma: no cover - configuration error, not logic
    raise ImportError("bcrypt is required for auth. Install with: pip install bcrypt")

from ..models.user import Principal, PublicUser, UserRecord
from ..services.user_store import UserStore
from ..utils.config import AuthSettings
from ..utils.exceptions import (
    AccountAlreadyExists,
    AuthError,
    InvalidEmailFormat,
    InvalidPassword,
    InvalidToken,
)
from ..utils.logger import get_logger
from . import rules
from .google_client import GoogleUserInfoClient
from .session import ANONYMOUS, AuthSession
from .tokens import decode_token, encode_token

logger = get_logger(__name__)

BCRYPT_MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthService:
    def __init__(
        self,
        settings: AuthSettings,
        user_store: UserStore,
        google_client: Optional[GoogleUserInfoClient] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.settings = settings
        self.user_store = user_store
        self.google_client = google_client or GoogleUserInfoClient()
        self._clock = clock

    def signup(self, email: str, password: str) -> UserRecord:
        """
        Create a password account.

        - Email must be well-formed and not yet registered (exact match).
        - Role comes from the email domain, once, here.
        """
        if not rules.validate_email_shape(email):
            raise InvalidEmailFormat()
        if not password:
            raise InvalidPassword()
        if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
            raise InvalidPassword(
                f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes"
            )

        user = UserRecord(
            email=email,
            password_hash=hash_password(password, self.settings.bcrypt_rounds),
            role=rules.derive_role(email, self.settings.org_domain),
        )
        self.user_store.add_user(user)
        logger.info("User signed up", user_id=user.id, role=user.role.value)
        return user

    def login(self, email: str, password: str) -> AuthSession:
        """Password login; trusts the role stored at signup."""
        account = None
        verified = False
        if rules.validate_email_shape(email):
            account = self.user_store.find_by_email(email)
            verified = account is not None and verify_password(
                password or "", account.password_hash
            )
        try:
            principal = rules.authenticate_with_password(email, account, verified)
        except AuthError as e:
            logger.info("Password login rejected", reason=type(e).__name__)
            raise
        logger.info("Password login succeeded", user_id=principal.user_id)
        return self._open_session(principal)

    def google_login(self, access_token: str) -> AuthSession:
        """Sign in with a Google access token, creating the account on first use."""
        identity = self.google_client.fetch_identity(access_token)
        account = self.user_store.find_by_email(identity.email) if identity.email else None
        principal = rules.authenticate_with_google_identity(
            identity, account, self.settings.org_domain
        )

        if account is None:
            # Google accounts get an unusable random password
            placeholder = "google-auth-" + secrets.token_urlsafe(16)
            try:
                account = self.user_store.add_user(
                    UserRecord(
                        email=principal.email,
                        password_hash=hash_password(placeholder, self.settings.bcrypt_rounds),
                        role=principal.role,
                        name=principal.name,
                        picture=principal.picture,
                    )
                )
                logger.info(
                    "Google account created", user_id=account.id, role=account.role.value
                )
            except AccountAlreadyExists:
                # A concurrent sign-in created it first; reuse its stored role
                account = self.user_store.find_by_email(principal.email)
                if account is None:
                    raise
            principal = Principal.from_record(account)

        logger.info("Google login succeeded", user_id=principal.user_id)
        return self._open_session(principal)

    def restore(self, token: str) -> AuthSession:
        """Rebuild a session from a bearer token; raises InvalidToken."""
        claims = decode_token(token, self.settings.jwt_secret, self.settings.jwt_algorithm)
        account = self.user_store.find_by_id(claims.subject)
        if account is None:
            raise InvalidToken()
        return AuthSession(
            token=token,
            user=PublicUser.from_principal(Principal.from_record(account)),
            expires_at=claims.expires_at,
        )

    def logout(self, session: AuthSession) -> AuthSession:
        if session.is_authenticated:
            logger.info("Logged out", user_id=session.user.id)
        return ANONYMOUS

    def _open_session(self, principal: Principal) -> AuthSession:
        claims = rules.issue_token(principal, self._clock())
        token = encode_token(claims, self.settings.jwt_secret, self.settings.jwt_algorithm)
        return AuthSession(
            token=token,
            user=PublicUser.from_principal(principal),
            expires_at=claims.expires_at,
        )

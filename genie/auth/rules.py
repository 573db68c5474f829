"""
Authentication decision rules.

Pure functions: no I/O, no clock reads. Callers resolve the account lookup,
the password check and the Google profile exchange beforehand and pass the
results in. Failures are raised as AuthError subclasses.

Role handling is intentionally asymmetric:
- password login returns the role stored at signup, never re-derived;
- Google sign-in derives the role only when it creates the account.
"""

import re
from datetime import datetime, timedelta
from typing import Optional

from ..models.user import GoogleIdentity, Principal, Role, TokenClaims, UserRecord
from ..utils.exceptions import (
    EmailMissing,
    InvalidCredentials,
    InvalidEmailFormat,
    InvalidGmailFormat,
    NonGmailRejected,
)

DEFAULT_ORG_DOMAIN = "techcurators.in"
GMAIL_DOMAIN = "gmail.com"
TOKEN_LIFETIME = timedelta(hours=24)

_EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE | re.ASCII)
_GMAIL_LOCAL_INVALID_CHAR_RE = re.compile(r"[^a-z0-9._]")

GMAIL_LOCAL_MIN_LENGTH = 6
GMAIL_LOCAL_MAX_LENGTH = 30


def validate_email_shape(email: str) -> bool:
    """True for local@domain.tld shaped addresses (TLD of two or more letters)."""
    if not email:
        return False
    return _EMAIL_RE.fullmatch(email) is not None


def derive_role(email: str, org_domain: str = DEFAULT_ORG_DOMAIN) -> Role:
    """Admin for addresses at the organisation domain (case-sensitive), user otherwise."""
    if email.endswith("@" + org_domain):
        return Role.ADMIN
    return Role.USER


def is_gmail_address(email: str) -> bool:
    return email.lower().endswith("@" + GMAIL_DOMAIN)


def validate_gmail_local_part(email: str) -> bool:
    """Gmail-only quality filter; any non-Gmail address passes."""
    if not is_gmail_address(email):
        return True

    local_part = email.split("@")[0].lower()
    return not (
        ".." in local_part
        or local_part.startswith(".")
        or local_part.endswith(".")
        or len(local_part) < GMAIL_LOCAL_MIN_LENGTH
        or len(local_part) > GMAIL_LOCAL_MAX_LENGTH
        or _GMAIL_LOCAL_INVALID_CHAR_RE.search(local_part) is not None
    )


def authenticate_with_password(
    email: str,
    account: Optional[UserRecord],
    password_verified: bool,
) -> Principal:
    """
    Decide a password login.

    A missing account and a wrong password raise the same InvalidCredentials
    so callers cannot tell which one happened.
    """
    if not validate_email_shape(email):
        raise InvalidEmailFormat()
    if account is None or not password_verified:
        raise InvalidCredentials()
    return Principal.from_record(account)


def authenticate_with_google_identity(
    identity: GoogleIdentity,
    account: Optional[UserRecord],
    org_domain: str = DEFAULT_ORG_DOMAIN,
) -> Principal:
    """
    Decide a Google sign-in for an identity already verified by Google.

    Without an existing account the returned principal carries a freshly
    derived role and no user id; the caller persists it.
    """
    email = identity.email
    if not email:
        raise EmailMissing()
    if not is_gmail_address(email):
        raise NonGmailRejected()
    if not validate_gmail_local_part(email):
        raise InvalidGmailFormat()

    if account is not None:
        return Principal.from_record(account)
    return Principal(
        email=email,
        role=derive_role(email, org_domain),
        name=identity.name,
        picture=identity.picture,
    )


def issue_token(principal: Principal, now: datetime) -> TokenClaims:
    """Stamp claims for a principal; they expire exactly 24 hours after now."""
    return TokenClaims(
        subject=principal.user_id or "",
        email=principal.email,
        role=principal.role,
        issued_at=now,
        expires_at=now + TOKEN_LIFETIME,
    )

"""Tests for the pure authentication decision rules"""

from datetime import datetime, timedelta, timezone

import pytest

from genie.auth import rules
from genie.models.user import GoogleIdentity, Principal, Role, UserRecord
from genie.utils.exceptions import (
    EmailMissing,
    InvalidCredentials,
    InvalidEmailFormat,
    InvalidGmailFormat,
    NonGmailRejected,
)


@pytest.mark.parametrize(
    "email",
    [
        "user@example.com",
        "USER@EXAMPLE.COM",
        "user@Example.Co",
        "first.last+tag@sub.example.org",
        "a_b%c-d@x-y.io",
    ],
)
def test_valid_email_shapes(email):
    assert rules.validate_email_shape(email)


@pytest.mark.parametrize(
    "email",
    [
        "",
        "userexample.com",
        "user@example",
        "user@example.c",
        "user@example.c0m",
        "us er@example.com",
        "user@example.com\n",
        "user@@example.com",
    ],
)
def test_invalid_email_shapes(email):
    assert not rules.validate_email_shape(email)


def test_derive_role():
    assert rules.derive_role("a@techcurators.in") == Role.ADMIN
    assert rules.derive_role("a@other.com") == Role.USER


def test_derive_role_is_case_sensitive_suffix_match():
    assert rules.derive_role("a@TECHCURATORS.IN") == Role.USER
    assert rules.derive_role("a@evil-techcurators.in") == Role.USER


def test_derive_role_uses_configured_domain():
    assert rules.derive_role("boss@acme.org", org_domain="acme.org") == Role.ADMIN
    assert rules.derive_role("a@techcurators.in", org_domain="acme.org") == Role.USER


@pytest.mark.parametrize(
    "email,expected",
    [
        ("ab@gmail.com", False),
        ("abcdef@gmail.com", True),
        ("a..b@gmail.com", False),
        ("abc..def@gmail.com", False),
        (".abcdef@gmail.com", False),
        ("abcdef.@gmail.com", False),
        ("abc-def@gmail.com", False),
        ("a" * 30 + "@gmail.com", True),
        ("a" * 31 + "@gmail.com", False),
        ("Jane.Doe@GMAIL.COM", True),
        ("ab@example.com", True),
        ("a..b@example.com", True),
    ],
)
def test_validate_gmail_local_part(email, expected):
    assert rules.validate_gmail_local_part(email) is expected


def _account(email="someone@example.com", role=Role.USER):
    return UserRecord(email=email, password_hash="x", role=role)


def test_password_auth_rejects_bad_email_shape():
    with pytest.raises(InvalidEmailFormat):
        rules.authenticate_with_password("not-an-email", _account(), True)


def test_password_auth_unknown_account_and_wrong_password_are_identical():
    with pytest.raises(InvalidCredentials) as unknown:
        rules.authenticate_with_password("someone@example.com", None, False)
    with pytest.raises(InvalidCredentials) as wrong:
        rules.authenticate_with_password("someone@example.com", _account(), False)
    assert type(unknown.value) is type(wrong.value)
    assert str(unknown.value) == str(wrong.value) == "Invalid email or password"


def test_password_auth_trusts_stored_role():
    account = _account(email="staff@techcurators.in", role=Role.USER)
    principal = rules.authenticate_with_password(account.email, account, True)
    assert principal.role == Role.USER
    assert principal.user_id == account.id


def test_google_auth_requires_email():
    with pytest.raises(EmailMissing):
        rules.authenticate_with_google_identity(GoogleIdentity(name="x"), None)


def test_google_auth_rejects_non_gmail():
    with pytest.raises(NonGmailRejected):
        rules.authenticate_with_google_identity(GoogleIdentity(email="a@techcurators.in"), None)


def test_google_auth_rejects_bad_gmail_local_part():
    with pytest.raises(InvalidGmailFormat):
        rules.authenticate_with_google_identity(GoogleIdentity(email="ab@gmail.com"), None)


def test_google_auth_new_account_derives_role():
    identity = GoogleIdentity(email="jane.doe@gmail.com", name="Jane", picture="p")
    principal = rules.authenticate_with_google_identity(identity, None)
    assert principal.role == Role.USER
    assert principal.user_id is None
    assert principal.name == "Jane"

    admin = rules.authenticate_with_google_identity(identity, None, org_domain="gmail.com")
    assert admin.role == Role.ADMIN


def test_google_auth_existing_account_keeps_stored_role():
    account = _account(email="jane.doe@gmail.com", role=Role.ADMIN)
    principal = rules.authenticate_with_google_identity(
        GoogleIdentity(email="jane.doe@gmail.com"), account
    )
    assert principal.role == Role.ADMIN
    assert principal.user_id == account.id


def test_issue_token_expires_after_24_hours():
    now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
    principal = Principal(email="a@b.com", role=Role.USER, user_id="u1")
    claims = rules.issue_token(principal, now)
    assert claims.issued_at == now
    assert claims.expires_at - claims.issued_at == timedelta(hours=24)
    assert claims.subject == "u1"
    assert claims.role == Role.USER

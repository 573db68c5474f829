"""JWT encoding/decoding for issued token claims."""

from datetime import datetime, timezone

import jwt

from ..models.user import Role, TokenClaims
from ..utils.exceptions import InvalidToken


def encode_token(claims: TokenClaims, secret: str, algorithm: str = "HS256") -> str:
    payload = {
        "sub": claims.subject,
        "email": claims.email,
        "role": claims.role.value,
        "iat": claims.issued_at,
        "exp": claims.expires_at,
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> TokenClaims:
    """Verify signature and expiry; any failure raises InvalidToken."""
    if not token:
        raise InvalidToken("Not authenticated")
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
        return TokenClaims(
            subject=payload["sub"],
            email=payload["email"],
            role=Role(payload["role"]),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )
    except jwt.PyJWTError:
        raise InvalidToken()
    except (KeyError, ValueError):
        raise InvalidToken()

"""Custom exceptions for Assessment Genie"""

from typing import Optional


class GenieError(Exception):
    """Base exception for Assessment Genie"""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    @property
    def detail(self) -> str:
        return str(self)


class ConfigError(GenieError):
    """Configuration error"""
    message = "Invalid configuration"


class StorageError(GenieError):
    """Reading or writing a JSON store failed"""
    message = "Storage failure"


class AuthError(GenieError):
    """Expected authentication/authorization outcome reported to the caller"""
    status_code = 400
    message = "Authentication failed"


class InvalidEmailFormat(AuthError):
    message = "Invalid email format"


class InvalidCredentials(AuthError):
    """Unknown email and wrong password are deliberately the same error."""
    status_code = 401
    message = "Invalid email or password"


class InvalidPassword(AuthError):
    message = "Password is required"


class AccountAlreadyExists(AuthError):
    message = "User already exists"


class EmailMissing(AuthError):
    status_code = 401
    message = "Google authentication failed: email not provided"


class NonGmailRejected(AuthError):
    message = "Only Gmail accounts can use Google Sign-in"


class InvalidGmailFormat(AuthError):
    message = "Invalid Gmail address format"


class InvalidToken(AuthError):
    status_code = 401
    message = "Invalid or expired token"


class PermissionDenied(AuthError):
    status_code = 403
    message = "You don't have permission to access this page."


class GoogleExchangeError(GenieError):
    """Google userinfo lookup failed"""
    status_code = 502
    message = "Failed to fetch user info from Google"


class InvalidDifficultyDistribution(GenieError):
    status_code = 400
    message = "The difficulty levels must add up to 100%"


class TopicRequestNotFound(GenieError):
    status_code = 404
    message = "Topic request not found"


class InvalidTopicRequest(GenieError):
    status_code = 400
    message = "Topic is required"

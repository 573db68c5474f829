"""
Google userinfo client.

Exchanges an OAuth access token (obtained by the browser) for the user's
profile. Whatever Google returns is trusted as verified; the decision rules
only look at the email's shape and domain.
"""

from typing import Optional

import requests
from pydantic import ValidationError

from ..models.user import GoogleIdentity
from ..utils.exceptions import GoogleExchangeError
from ..utils.logger import get_logger

logger = get_logger(__name__)

GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


class GoogleUserInfoClient:
    """Fetch a GoogleIdentity for an access token"""

    def __init__(
        self,
        userinfo_url: str = GOOGLE_USERINFO_URL,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.userinfo_url = userinfo_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_identity(self, access_token: str) -> GoogleIdentity:
        if not access_token:
            raise GoogleExchangeError("Google access token is required")
        try:
            response = self.session.get(
                self.userinfo_url,
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Google userinfo request failed", error=str(e))
            raise GoogleExchangeError()

        if not response.ok:
            logger.warning("Google userinfo rejected token", status_code=response.status_code)
            raise GoogleExchangeError()

        try:
            data = response.json()
        except ValueError:
            raise GoogleExchangeError("Google returned an unreadable profile")
        if not isinstance(data, dict):
            raise GoogleExchangeError("Google returned an unreadable profile")

        try:
            return GoogleIdentity(
                email=data.get("email"),
                name=data.get("name"),
                picture=data.get("picture"),
            )
        except ValidationError as e:
            logger.warning("Google profile has unexpected field types", errors=e.error_count())
            raise GoogleExchangeError("Google returned an unreadable profile")

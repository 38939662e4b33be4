"""LinkedIn OAuth 2.0 / OpenID Connect client."""

from typing import Any
from urllib.parse import urlencode
import httpx
import logging
from pydantic import ValidationError

from app.config import get_settings
from app.models.profile import UserProfile

logger = logging.getLogger(__name__)


class LinkedInAPIError(Exception):
    """LinkedIn answered, but not with what we expected."""


class LinkedInClient:
    """Client for LinkedIn's authorization code flow.

    Builds the authorization redirect, exchanges the returned code for an
    access token and fetches the member's userinfo document.
    """

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        redirect_uri: str | None = None,
    ):
        settings = get_settings()
        self.client_id = client_id if client_id is not None else settings.linkedin_client_id
        self.client_secret = (
            client_secret if client_secret is not None else settings.linkedin_client_secret
        )
        self.redirect_uri = redirect_uri or settings.linkedin_redirect_uri
        self.scope = settings.linkedin_scope
        self.authorization_endpoint = settings.linkedin_authorization_url
        self.token_endpoint = settings.linkedin_token_url
        self.userinfo_endpoint = settings.linkedin_userinfo_url
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=10.0)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def authorization_url(self, state: str) -> str:
        """URL of LinkedIn's consent page for this state token."""
        query = urlencode({
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "state": state,
            "scope": self.scope,
        })
        return f"{self.authorization_endpoint}?{query}"

    async def exchange_code_for_token(self, code: str) -> str:
        """Trade an authorization code for an access token.

        Raises httpx.HTTPError if the request fails and LinkedInAPIError if
        the response carries no access token.
        """
        client = await self._get_client()
        response = await client.post(
            self.token_endpoint,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.redirect_uri,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
        )
        response.raise_for_status()

        data = _json_object(response, "token")
        access_token = data.get("access_token")
        if not access_token:
            raise LinkedInAPIError("Token response did not include an access token")

        logger.info("Access token retrieved successfully.")
        return access_token

    async def fetch_profile(self, access_token: str) -> dict[str, Any]:
        """Fetch the OpenID Connect userinfo document for an access token."""
        client = await self._get_client()
        response = await client.get(
            self.userinfo_endpoint,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        response.raise_for_status()

        data = _json_object(response, "userinfo")
        logger.info(f"LinkedIn profile response: {data}")
        return data


def _json_object(response: httpx.Response, what: str) -> dict[str, Any]:
    try:
        data = response.json()
    except ValueError as e:
        raise LinkedInAPIError(f"Invalid {what} response: {e}") from e
    if not isinstance(data, dict):
        raise LinkedInAPIError(f"Unexpected {what} response")
    return data


def profile_from_userinfo(template_id: str, userinfo: dict[str, Any]) -> UserProfile:
    """Map LinkedIn userinfo claims onto a UserProfile.

    Raises LinkedInAPIError if a claim has a type the profile cannot hold.
    """
    try:
        return UserProfile(
            id=template_id,
            full_name=userinfo.get("name"),
            first_name=userinfo.get("given_name"),
            last_name=userinfo.get("family_name"),
            profile_picture=userinfo.get("picture"),
            email=userinfo.get("email") or None,
            email_verified=bool(userinfo.get("email_verified") or False),
        )
    except ValidationError as e:
        raise LinkedInAPIError(f"Unexpected userinfo claims: {e}") from e

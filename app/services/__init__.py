"""Services for the LinkedIn bridge."""

from app.services.state_registry import StateRegistry
from app.services.sessions import SessionStore
from app.services.linkedin import LinkedInClient, LinkedInAPIError, profile_from_userinfo

__all__ = [
    "StateRegistry",
    "SessionStore",
    "LinkedInClient",
    "LinkedInAPIError",
    "profile_from_userinfo",
]

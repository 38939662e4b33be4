"""Pydantic models for the LinkedIn bridge."""

from app.models.profile import UserProfile
from app.models.linkedin import ImportRequest, ImportResponse

__all__ = [
    # Profile models
    "UserProfile",
    # Import models
    "ImportRequest",
    "ImportResponse",
]

"""User profile models."""

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """Profile fetched from LinkedIn, keyed to the template it was requested for."""
    id: str = Field(..., min_length=1)
    full_name: str | None = Field(default=None, alias="fullName")
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    profile_picture: str | None = Field(default=None, alias="profilePicture")
    email: str | None = None
    email_verified: bool = Field(default=False, alias="emailVerified")

    model_config = {"populate_by_name": True, "frozen": True}

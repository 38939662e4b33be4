"""LinkedIn import request/response models."""

from pydantic import BaseModel, Field


class ImportRequest(BaseModel):
    """Request to start a LinkedIn import for a template.

    Fields are optional here so that missing values are reported as a
    400 by the endpoint rather than a schema validation error.
    """
    linkedin_url: str | None = Field(default=None, alias="linkedinUrl")
    template_id: str | int | None = Field(default=None, alias="templateId")

    model_config = {"populate_by_name": True}


class ImportResponse(BaseModel):
    """Where the frontend should send the browser next."""
    authorization_url: str = Field(..., alias="authorizationUrl")

    model_config = {"populate_by_name": True}

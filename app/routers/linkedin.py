"""LinkedIn sign-in API endpoints."""

import logging
from typing import AsyncGenerator
from urllib.parse import quote

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import RedirectResponse

from app.config import get_settings
from app.models.linkedin import ImportRequest, ImportResponse
from app.services.linkedin import LinkedInAPIError, LinkedInClient, profile_from_userinfo
from app.services.sessions import SessionStore
from app.services.state_registry import StateRegistry
from app.stores import get_session_store, get_state_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/linkedin", tags=["linkedin"])


async def get_linkedin_client() -> AsyncGenerator[LinkedInClient, None]:
    """Dependency for the LinkedIn client, closed after the request."""
    client = LinkedInClient()
    try:
        yield client
    finally:
        await client.close()


@router.post("/import", response_model=ImportResponse)
async def import_profile(payload: ImportRequest) -> ImportResponse:
    """Validate a LinkedIn profile URL and point the browser at the auth endpoint."""
    settings = get_settings()

    if not payload.linkedin_url or not payload.linkedin_url.startswith(
        settings.linkedin_profile_prefix
    ):
        logger.error(f"Invalid LinkedIn URL: {payload.linkedin_url}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please provide a valid LinkedIn profile URL.",
        )
    template_id = "" if payload.template_id is None else str(payload.template_id)
    if not template_id:
        logger.error("Template ID is missing in /api/linkedin/import")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Template ID is required.",
        )

    logger.info(
        f"Import request received with templateId: {template_id} "
        f"and linkedinUrl: {payload.linkedin_url}"
    )
    authorization_url = (
        f"{settings.base_url.rstrip('/')}/api/linkedin/auth"
        f"?templateId={quote(template_id, safe='')}"
    )
    return ImportResponse(authorization_url=authorization_url)


@router.get("/auth")
async def authorize(
    template_id: str | None = Query(default=None, alias="templateId"),
    states: StateRegistry = Depends(get_state_registry),
    linkedin: LinkedInClient = Depends(get_linkedin_client),
) -> RedirectResponse:
    """Issue a CSRF state and redirect the browser to LinkedIn."""
    if not template_id:
        logger.error("Template ID is missing in /api/linkedin/auth")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Template ID is required.",
        )

    logger.info(f"Received templateId: {template_id}")
    state = states.issue(template_id)
    return RedirectResponse(
        url=linkedin.authorization_url(state),
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/callback")
async def callback(
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    error_description: str | None = None,
    states: StateRegistry = Depends(get_state_registry),
    sessions: SessionStore = Depends(get_session_store),
    linkedin: LinkedInClient = Depends(get_linkedin_client),
) -> RedirectResponse:
    """Handle LinkedIn's redirect: validate state, fetch the profile, open a session."""
    logger.info(f"Received callback with state: {state}")

    template_id = states.redeem(state) if state else None
    if template_id is None:
        logger.error("Invalid or missing state in /api/linkedin/callback")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid state. Potential CSRF attack detected.",
        )

    if error:
        logger.error(f"LinkedIn authorization denied: {error} ({error_description})")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_description or error,
        )
    if not code:
        logger.error("Authorization code is missing in /api/linkedin/callback")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Authorization code is required.",
        )

    try:
        access_token = await linkedin.exchange_code_for_token(code)
        userinfo = await linkedin.fetch_profile(access_token)
        profile = profile_from_userinfo(template_id, userinfo)
    except (httpx.HTTPError, LinkedInAPIError) as e:
        logger.error(f"Error fetching LinkedIn data: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch LinkedIn data",
        )

    logger.info(f"Generated user data for templateId: {template_id}")
    session_id = sessions.create(profile)

    settings = get_settings()
    redirect_url = (
        f"{settings.frontend_url.rstrip('/')}/details/{quote(template_id, safe='')}"
        f"?sessionId={session_id}"
    )
    return RedirectResponse(url=redirect_url, status_code=status.HTTP_302_FOUND)

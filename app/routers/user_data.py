"""Profile handoff endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.models.profile import UserProfile
from app.services.sessions import SessionStore
from app.stores import get_session_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user-data", tags=["user-data"])


@router.get("/{session_id}", response_model=UserProfile)
async def get_user_data(
    session_id: str,
    sessions: SessionStore = Depends(get_session_store),
) -> UserProfile:
    """Return the profile stored for a session ID."""
    logger.info(f"Request received for sessionId: {session_id}")

    profile = sessions.get(session_id)
    if profile is None:
        logger.error(f"Session ID not found: {session_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session data not found",
        )
    return profile

"""One-time handoff of fetched profiles to the frontend."""

import logging
import uuid

from app.models.profile import UserProfile

logger = logging.getLogger(__name__)


class SessionStore:
    """Maps session IDs to the profiles fetched for them.

    Records are kept until the process exits.
    """

    def __init__(self):
        self._profiles: dict[str, UserProfile] = {}

    def create(self, profile: UserProfile) -> str:
        """Store a profile under a new session ID and return the ID."""
        session_id = str(uuid.uuid4())
        self._profiles[session_id] = profile
        logger.info(f"Generated sessionId: {session_id}")
        return session_id

    def get(self, session_id: str) -> UserProfile | None:
        """Look up the profile for a session ID."""
        return self._profiles.get(session_id)

    def __len__(self) -> int:
        return len(self._profiles)

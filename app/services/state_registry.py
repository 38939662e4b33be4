"""CSRF state tokens for pending LinkedIn authorizations."""

import logging
import secrets
import time
from typing import Callable

from app.config import get_settings
from app.utils.expiring import ExpiringStore

logger = logging.getLogger(__name__)


class StateRegistry:
    """Tracks which template each outstanding authorization redirect belongs to.

    A state token is single-use and only valid for ``ttl_seconds`` after it
    was issued.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds is None:
            ttl_seconds = get_settings().state_ttl_seconds
        self.ttl_seconds = ttl_seconds
        self._pending: ExpiringStore[str] = ExpiringStore(clock=clock)

    def issue(self, template_id: str) -> str:
        """Create a state token bound to ``template_id``."""
        if not template_id:
            raise ValueError("Template ID is required")

        removed = self._pending.sweep()
        if removed:
            logger.info(f"Dropped {removed} expired state(s)")

        state = secrets.token_hex(16)
        self._pending.set(state, template_id, self.ttl_seconds)
        logger.info(f"Generated state: {state} for templateId: {template_id}")
        return state

    def redeem(self, state: str) -> str | None:
        """Consume a state token.

        Returns the associated template ID, or None if the token is unknown,
        expired or already used.
        """
        if not state:
            return None
        template_id = self._pending.pop(state)
        if template_id is None:
            logger.warning(f"State not found or expired: {state}")
            return None
        logger.info(f"State validated: {state}. Associated templateId: {template_id}")
        return template_id

    def __len__(self) -> int:
        return len(self._pending)

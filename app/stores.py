"""In-memory stores shared by the request handlers."""

import logging

from app.services.sessions import SessionStore
from app.services.state_registry import StateRegistry

logger = logging.getLogger(__name__)


class Stores:
    """Process-wide store manager.

    Nothing is persisted: closing (or restarting the process) drops every
    pending authorization and session.
    """

    state_registry: StateRegistry | None = None
    session_store: SessionStore | None = None

    @classmethod
    def open(cls) -> None:
        """Create fresh, empty stores."""
        cls.state_registry = StateRegistry()
        cls.session_store = SessionStore()
        logger.info(
            f"In-memory stores ready (state TTL {cls.state_registry.ttl_seconds}s)"
        )

    @classmethod
    def close(cls) -> None:
        """Release the stores."""
        if cls.state_registry is not None or cls.session_store is not None:
            cls.state_registry = None
            cls.session_store = None
            logger.info("In-memory stores released")

    @classmethod
    def get_state_registry(cls) -> StateRegistry:
        """Get the state registry."""
        if cls.state_registry is None:
            raise RuntimeError("Stores not open. Call Stores.open() first.")
        return cls.state_registry

    @classmethod
    def get_session_store(cls) -> SessionStore:
        """Get the session store."""
        if cls.session_store is None:
            raise RuntimeError("Stores not open. Call Stores.open() first.")
        return cls.session_store


def get_state_registry() -> StateRegistry:
    """Dependency for the state registry."""
    return Stores.get_state_registry()


def get_session_store() -> SessionStore:
    """Dependency for the session store."""
    return Stores.get_session_store()

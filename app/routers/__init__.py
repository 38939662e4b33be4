"""API routers for the LinkedIn bridge."""

from app.routers.linkedin import router as linkedin_router
from app.routers.user_data import router as user_data_router

__all__ = [
    "linkedin_router",
    "user_data_router",
]

"""Utility helpers for the LinkedIn bridge."""

from app.utils.expiring import ExpiringStore

__all__ = ["ExpiringStore"]

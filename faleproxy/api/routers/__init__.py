"""API router factory functions."""
from .fetch import create_fetch_router
from .systems import create_systems_router

__all__ = [
    "create_fetch_router",
    "create_systems_router",
]

"""
Steam router package.

Exports the router for the Steam game library endpoints.
"""

from .steam_router import router

__all__ = ["router"]

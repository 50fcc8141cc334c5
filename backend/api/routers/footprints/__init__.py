"""
Footprints router package.

Exports the router for footprint endpoints.
"""

from .footprints_router import router

__all__ = ["router"]

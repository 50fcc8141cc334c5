"""Steam view response mapping."""

from backend.models.common import OperationResult
from backend.models.steam import ResolveVanityResponse


def map_vanity_to_response(vanity_name: str, steam_id: str) -> ResolveVanityResponse:
    return ResolveVanityResponse(vanity_name=vanity_name, steam_id=steam_id)


def map_cache_cleared_to_response(deleted: bool) -> OperationResult:
    """Report whether a cached library was removed."""
    if deleted:
        return OperationResult(success=True, message="缓存已清除")
    return OperationResult(success=True, message="没有可清除的缓存")

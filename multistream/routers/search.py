from fastapi import APIRouter

from multistream.models.streamer import SearchResponse
from multistream.services import search as search_service

router = APIRouter(prefix="/api/v1", tags=["search"])


@router.get("/search")
def search_streams(query: str | None = None, platform: str | None = None, limit: str | None = None) -> SearchResponse:
    # limit stays a string so malformed values fall back to the default instead of a 422
    return search_service.search(platform, query, limit)

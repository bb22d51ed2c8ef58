from fastapi import APIRouter

from multistream.models.streamer import StreamResponse
from multistream.services import search as search_service

router = APIRouter(prefix="/api/v1", tags=["stream"])


@router.get("/stream/{platform}/{stream_id}")
def get_stream(platform: str, stream_id: str) -> StreamResponse:
    return search_service.get_stream(platform, stream_id)

from fastmcp import FastMCP

from multistream.exceptions import ClientError, MultistreamError, NotFoundError, RateLimitError
from multistream.services import search as search_service

mcp = FastMCP("MultiStream")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, ClientError):
        return {"error": "invalid_request", "message": str(e), "action": "Fix the arguments and retry"}
    if isinstance(e, NotFoundError):
        return {"error": "not_found", "message": str(e)}
    if isinstance(e, RateLimitError):
        return {"error": "rate_limit", "message": str(e), "action": "Wait a moment and retry"}
    if isinstance(e, MultistreamError):
        return {"error": "upstream_error", "message": str(e)}
    return {"error": "unknown_error", "message": str(e)}


@mcp.tool
def stream_search(query: str, platform: str = "all", limit: int = 20) -> dict:
    """Search live streams and videos on YouTube and Kick.
    platform is 'youtube', 'kick' or 'all'. With 'all', the limit is split evenly between the two platforms.
    Each result has id, platform, username, displayName, title, viewerCount, isLive, embedUrl and chatUrl."""
    try:
        result = search_service.search(platform, query, limit)
        streamers = [s.model_dump(by_alias=True) for s in result.streamers]
        return {"streamers": streamers, "count": len(streamers), "platform": result.platform, "query": result.query}
    except MultistreamError as e:
        return _handle_mcp_error(e)


@mcp.tool
def stream_info(platform: str, stream_id: str) -> dict:
    """Get one stream's details. For youtube pass a video ID, for kick pass the channel slug (e.g. 'xqc').
    Returns the streamer plus its embedUrl and chatUrl."""
    try:
        return search_service.get_stream(platform, stream_id).model_dump(by_alias=True)
    except MultistreamError as e:
        return _handle_mcp_error(e)

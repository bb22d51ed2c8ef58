"""Cross-platform search and single-stream lookup.

Parameters are validated here, before any upstream call. An all-platform
search degrades to whichever platform answered and fails only when both did.
"""

from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache

import structlog

from multistream.config import get_settings
from multistream.exceptions import ClientError, MultistreamError, NotFoundError, UpstreamError
from multistream.models.streamer import SearchResponse, StreamResponse, Streamer
from multistream.services.kick import KickClient
from multistream.services.youtube import YouTubeClient

logger = structlog.get_logger(__name__)

DEFAULT_LIMIT = 20
MAX_LIMIT = 50
ALL_PLATFORMS = ("", "all")


@lru_cache
def get_youtube_client() -> YouTubeClient:
    return YouTubeClient(get_settings())


@lru_cache
def get_kick_client() -> KickClient:
    return KickClient(get_settings())


def parse_limit(raw: str | int | None) -> int:
    """Accept a limit in 1..50; anything else falls back to the default."""
    if raw is None:
        return DEFAULT_LIMIT
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    if 0 < value <= MAX_LIMIT:
        return value
    return DEFAULT_LIMIT


def _search_all(query: str, limit: int) -> list[Streamer]:
    per_platform = limit // 2
    youtube = get_youtube_client()
    kick = get_kick_client()
    with ThreadPoolExecutor(max_workers=2) as pool:
        yt_future = pool.submit(youtube.search_videos, query, per_platform)
        kick_future = pool.submit(kick.search_channels, query, per_platform)

    streamers: list[Streamer] = []
    errors: dict[str, Exception] = {}
    for platform, future in (("youtube", yt_future), ("kick", kick_future)):
        try:
            streamers.extend(future.result())
        except MultistreamError as e:
            logger.warning("search.platform_failed", platform=platform, query=query, error=str(e))
            errors[platform] = e
        except Exception as e:
            logger.exception("search.platform_crashed", platform=platform, query=query)
            errors[platform] = e

    if len(errors) == 2:
        first = errors["youtube"]
        if isinstance(first, MultistreamError):
            raise UpstreamError(str(first)) from first
        raise UpstreamError(f"youtube search failed: {first!r}") from first
    return streamers


def search(platform: str | None, query: str | None, limit: str | int | None = None) -> SearchResponse:
    """Search one platform, or both when platform is "" or "all"."""
    if not query:
        raise ClientError("query parameter is required")
    platform = platform or ""
    if platform not in ("youtube", "kick", *ALL_PLATFORMS):
        raise ClientError("invalid platform: must be youtube, kick, or all")
    max_results = parse_limit(limit)

    if platform == "youtube":
        streamers = get_youtube_client().search_videos(query, max_results)
    elif platform == "kick":
        streamers = get_kick_client().search_channels(query, max_results)
    else:
        streamers = _search_all(query, max_results)
    return SearchResponse(streamers=streamers, platform=platform, query=query)


def get_stream(platform: str, stream_id: str | None) -> StreamResponse:
    """Look up one stream. Every client failure is reported as not found."""
    if not stream_id or not stream_id.strip():
        raise ClientError("stream ID is required")
    if platform not in ("youtube", "kick"):
        raise ClientError("invalid platform: must be youtube or kick")

    try:
        if platform == "youtube":
            streamer = get_youtube_client().get_stream_info(stream_id)
        else:
            streamer = get_kick_client().get_channel_info(stream_id)
    except NotFoundError:
        raise
    except MultistreamError as e:
        raise NotFoundError(str(e)) from e
    return StreamResponse.from_streamer(streamer)

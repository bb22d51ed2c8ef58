import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from multistream.config import Settings
from multistream.exceptions import ConfigurationError, NotFoundError, RateLimitError, UpstreamError
from multistream.models.streamer import Streamer


KEY_ERROR_REASONS = {"keyInvalid", "keyExpired", "API_KEY_INVALID"}


def _is_key_error(e: HttpError) -> bool:
    """True when a 400 names the API key itself (legacy "errors" or newer "details" reasons)."""
    details = getattr(e, "error_details", None)
    if not isinstance(details, list):
        return False
    return any(isinstance(d, dict) and d.get("reason") in KEY_ERROR_REASONS for d in details)


def _handle_api_error(e: HttpError):
    if e.resp.status == 429:
        raise RateLimitError("YouTube API rate limit exceeded. Try again shortly.") from e
    if e.resp.status in (401, 403) or (e.resp.status == 400 and _is_key_error(e)):
        raise ConfigurationError(
            f"YouTube API rejected the request (HTTP {e.resp.status}). Check YOUTUBE_API_KEY in .env."
        ) from e
    raise UpstreamError(f"YouTube API error: {e}") from e


def _best_thumbnail(thumbnails: dict) -> str:
    for key in ("high", "medium"):
        url = thumbnails.get(key, {}).get("url")
        if url:
            return url
    return ""


def _parse_count(value) -> int:
    """YouTube sends counts as strings; anything unparseable counts as zero."""
    try:
        return max(int(value), 0)
    except (TypeError, ValueError):
        return 0


def _viewer_count(item: dict) -> int:
    live = item.get("liveStreamingDetails", {})
    if live.get("concurrentViewers"):
        return _parse_count(live["concurrentViewers"])
    stats = item.get("statistics", {})
    if stats.get("viewCount"):
        return _parse_count(stats["viewCount"])
    return 0


class YouTubeClient:
    def __init__(self, settings: Settings):
        self.api_key = settings.youtube_api_key
        self.timeout = settings.request_timeout

    def _get_service(self):
        if not self.api_key:
            raise ConfigurationError(
                "YouTube API key not configured. Set YOUTUBE_API_KEY in .env"
            )
        return build(
            "youtube",
            "v3",
            developerKey=self.api_key,
            http=httplib2.Http(timeout=self.timeout),
            cache_discovery=False,
        )

    def _execute(self, request) -> dict:
        try:
            return request.execute()
        except HttpError as e:
            _handle_api_error(e)
        except (httplib2.HttpLib2Error, OSError) as e:
            raise UpstreamError(f"YouTube request failed: {e}") from e

    def search_videos(self, query: str, max_results: int) -> list[Streamer]:
        """Search YouTube videos (live, upcoming and past) in relevance order."""
        service = self._get_service()
        if max_results <= 0:
            return []
        result = self._execute(service.search().list(
            q=query,
            part="snippet",
            type="video",
            maxResults=min(max_results, 50),
            order="relevance",
        ))
        streamers = []
        for item in result.get("items", []):
            video_id = item.get("id", {}).get("videoId", "")
            if not video_id:
                continue
            snippet = item.get("snippet", {})
            streamers.append(Streamer(
                id=video_id,
                platform="youtube",
                username=snippet.get("channelId", ""),
                display_name=snippet.get("channelTitle", ""),
                title=snippet.get("title", ""),
                thumbnail=_best_thumbnail(snippet.get("thumbnails", {})),
                is_live=snippet.get("liveBroadcastContent") == "live",
            ))
        return streamers

    def get_stream_info(self, video_id: str) -> Streamer:
        """Get one video with its live viewer count, or total views when not live."""
        service = self._get_service()
        result = self._execute(service.videos().list(
            id=video_id,
            part="snippet,liveStreamingDetails,statistics",
        ))
        items = result.get("items", [])
        if not items:
            raise NotFoundError(f"YouTube video not found: {video_id}")
        item = items[0]
        snippet = item.get("snippet", {})
        return Streamer(
            id=item.get("id") or video_id,
            platform="youtube",
            username=snippet.get("channelId", ""),
            display_name=snippet.get("channelTitle", ""),
            title=snippet.get("title", ""),
            thumbnail=_best_thumbnail(snippet.get("thumbnails", {})),
            viewer_count=_viewer_count(item),
            is_live=snippet.get("liveBroadcastContent") == "live",
        )

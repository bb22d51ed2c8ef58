"""Kick channel search and lookup.

Kick has no reliable public search endpoint, so search walks a fallback chain
of candidate URLs and, when none of them yields channels, tries the query as a
channel slug. Search never raises: the aggregator must be able to carry on
with YouTube results alone. Direct lookups do raise.
"""

from urllib.parse import quote

import structlog
from pydantic import TypeAdapter, ValidationError

from multistream.config import Settings
from multistream.exceptions import MultistreamError, NotFoundError
from multistream.models.kick import (
    KickCategory,
    KickChannel,
    KickSearchChannel,
    KickSearchResponse,
    KickUser,
)
from multistream.models.streamer import Streamer
from multistream.services.kick_client import BASE_URL, kick_get

logger = structlog.get_logger(__name__)

SEARCH_ENDPOINTS = (
    f"{BASE_URL}/api/v2/search/channels",
    f"{BASE_URL}/api/v1/search",
    f"{BASE_URL}/api/search",
)
CHANNEL_URL = f"{BASE_URL}/api/v2/channels/{{slug}}"

# Bodies at or below this size are empty envelopes like "[]" or "{}".
MIN_BODY_BYTES = 10

_channel_list = TypeAdapter(list[KickSearchChannel])


def normalize_slug(value: str) -> str:
    """Turn user input into a Kick channel slug: trimmed, lowercase, no spaces."""
    return value.strip().lower().replace(" ", "")


def _decode_as_list(body: bytes) -> list[KickSearchChannel]:
    return _channel_list.validate_json(body)


def _decode_as_envelope(body: bytes) -> list[KickSearchChannel]:
    return KickSearchResponse.model_validate_json(body).channels or []


# Tried in order; the first decoder that yields at least one channel wins.
SEARCH_DECODERS = (
    ("list", _decode_as_list),
    ("envelope", _decode_as_envelope),
)


def decode_search_body(body: bytes) -> list[KickSearchChannel]:
    for variant, decoder in SEARCH_DECODERS:
        try:
            channels = decoder(body)
        except ValidationError:
            logger.debug("kick.search.decode_failed", variant=variant)
            continue
        if channels:
            return channels
    return []


def _first_category_name(categories: list[KickCategory] | None) -> str:
    if categories:
        return categories[0].name or ""
    return ""


def _search_channel_to_streamer(channel: KickSearchChannel) -> Streamer:
    username = channel.username or ""
    slug = channel.slug or username.lower()
    title = _first_category_name(channel.recent_categories) or username
    return Streamer(
        id=str(channel.id),
        platform="kick",
        username=slug,
        display_name=username,
        title=title,
        thumbnail=channel.profile_pic or "",
        viewer_count=max(channel.viewer_count or 0, 0),
        is_live=bool(channel.is_live),
    )


def _channel_to_streamer(channel: KickChannel) -> Streamer:
    user = channel.user or KickUser()
    username = user.username or ""
    title = ""
    thumbnail = user.profile_pic or ""
    viewer_count = 0
    is_live = False
    if channel.livestream is not None:
        live = channel.livestream
        title = live.session_title or ""
        viewer_count = max(live.viewer_count or 0, 0)
        is_live = bool(live.is_live)
        if live.thumbnail and live.thumbnail.url:
            thumbnail = live.thumbnail.url
    if not title:
        title = _first_category_name(channel.recent_categories)
    if not title:
        title = username
    return Streamer(
        id=str(channel.id),
        platform="kick",
        username=channel.slug or "",
        display_name=username,
        title=title,
        thumbnail=thumbnail,
        viewer_count=viewer_count,
        is_live=is_live,
    )


class KickClient:
    def __init__(self, settings: Settings):
        self.timeout = settings.request_timeout

    def search_channels(self, query: str, max_results: int) -> list[Streamer]:
        """Search Kick channels. Returns [] rather than raising on any failure."""
        if max_results <= 0:
            return []
        referer = f"{BASE_URL}/search?query={quote(query)}"
        for url in SEARCH_ENDPOINTS:
            try:
                resp = kick_get(url, self.timeout, params={"query": query}, referer=referer)
            except MultistreamError as e:
                logger.info("kick.search.request_failed", url=url, error=str(e))
                continue
            if resp.status_code != 200 or len(resp.content) <= MIN_BODY_BYTES:
                logger.info("kick.search.endpoint_unusable", url=url, status=resp.status_code)
                continue
            channels = decode_search_body(resp.content)
            if channels:
                logger.debug("kick.search.hit", url=url, count=len(channels))
                return [_search_channel_to_streamer(c) for c in channels[:max_results]]
        return self._lookup_fallback(query, max_results)

    def _lookup_fallback(self, query: str, max_results: int) -> list[Streamer]:
        slug = normalize_slug(query)
        logger.info("kick.search.slug_fallback", slug=slug)
        if not slug:
            return []
        try:
            streamer = self.get_channel_info(slug)
        except MultistreamError as e:
            logger.info("kick.search.slug_fallback_failed", slug=slug, error=str(e))
            return []
        return [streamer][:max_results]

    def get_channel_info(self, channel_slug: str) -> Streamer:
        """Fetch one channel by slug. Raises NotFoundError on non-200 or bad JSON."""
        slug = normalize_slug(channel_slug)
        url = CHANNEL_URL.format(slug=quote(slug, safe=""))
        resp = kick_get(url, self.timeout)
        if resp.status_code != 200:
            raise NotFoundError(f"Kick channel not found: {slug} (HTTP {resp.status_code})")
        try:
            channel = KickChannel.model_validate_json(resp.content)
        except ValidationError as e:
            raise NotFoundError(f"Kick channel response for {slug} could not be decoded: {e}") from e
        return _channel_to_streamer(channel)

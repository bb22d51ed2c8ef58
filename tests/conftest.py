import json

import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from multistream.config import Settings, get_settings

requires_youtube = pytest.mark.skipif(
    not get_settings().youtube_api_key,
    reason="YouTube API key not configured. Set YOUTUBE_API_KEY in .env",
)


# --- Canned API responses ---

YOUTUBE_SEARCH_RESPONSE = {
    "items": [
        {
            "id": {"kind": "youtube#video", "videoId": "live123"},
            "snippet": {
                "channelId": "UCabc",
                "channelTitle": "Lofi Girl",
                "title": "lofi hip hop radio",
                "liveBroadcastContent": "live",
                "thumbnails": {
                    "default": {"url": "https://i.ytimg.com/vi/live123/default.jpg"},
                    "medium": {"url": "https://i.ytimg.com/vi/live123/mqdefault.jpg"},
                    "high": {"url": "https://i.ytimg.com/vi/live123/hqdefault.jpg"},
                },
            },
        },
        {
            "id": {"kind": "youtube#video", "videoId": "vod456"},
            "snippet": {
                "channelId": "UCdef",
                "channelTitle": "Some Channel",
                "title": "Past broadcast",
                "liveBroadcastContent": "none",
                "thumbnails": {
                    "medium": {"url": "https://i.ytimg.com/vi/vod456/mqdefault.jpg"},
                },
            },
        },
    ],
}

YOUTUBE_VIDEO_RESPONSE = {
    "items": [
        {
            "id": "live123",
            "snippet": {
                "channelId": "UCabc",
                "channelTitle": "Lofi Girl",
                "title": "lofi hip hop radio",
                "liveBroadcastContent": "live",
                "thumbnails": {"high": {"url": "https://i.ytimg.com/vi/live123/hqdefault.jpg"}},
            },
            "statistics": {"viewCount": "987654"},
            "liveStreamingDetails": {"concurrentViewers": "31337"},
        },
    ],
}

KICK_SEARCH_CHANNEL = {
    "id": 668,
    "username": "xQc",
    "slug": "xqc",
    "profile_pic": "https://files.kick.com/images/user/676/profile_image/xqc.webp",
    "is_live": True,
    "viewer_count": 52000,
    "followers_count": 800000,
    "verified": True,
    "recent_categories": [{"id": 15, "name": "Just Chatting", "slug": "just-chatting"}],
}

KICK_CHANNEL_RESPONSE = {
    "id": 668,
    "slug": "xqc",
    "user": {"username": "xQc", "profile_pic": "https://files.kick.com/images/user/676/profile_image/xqc.webp"},
    "livestream": {
        "id": 99,
        "session_title": "DRAMA + REACT",
        "is_live": True,
        "viewer_count": 48000,
        "thumbnail": {"url": "https://images.kick.com/video_thumbnails/xqc/live.webp"},
    },
    "recent_categories": [{"name": "Just Chatting"}],
    "verified": True,
}


def kick_response(status_code: int = 200, payload=None, content: bytes | None = None) -> MagicMock:
    """Fake curl_cffi response carrying a JSON payload or raw bytes."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content if content is not None else json.dumps(payload).encode()
    return resp


@pytest.fixture
def settings():
    return Settings(youtube_api_key="test-key", request_timeout=10.0)


@pytest.fixture
def mock_youtube_build(mocker):
    mock_svc = MagicMock()
    mocker.patch("multistream.services.youtube.build", return_value=mock_svc)
    return mock_svc


@pytest.fixture
def mock_kick_get(mocker):
    return mocker.patch("multistream.services.kick.kick_get")


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from multistream.main import api
    return TestClient(api)

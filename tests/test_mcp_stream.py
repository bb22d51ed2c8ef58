import pytest

from multistream.exceptions import ClientError, NotFoundError, RateLimitError, UpstreamError
from multistream.models.streamer import SearchResponse, StreamResponse, Streamer

KICK = Streamer(id="668", platform="kick", username="xqc", display_name="xQc", title="Just Chatting")


@pytest.fixture(autouse=True)
def mock_svc(mocker):
    return mocker.patch("multistream.mcp_server.search_service")


class TestStreamSearch:
    def test_returns_dict(self, mock_svc):
        mock_svc.search.return_value = SearchResponse(streamers=[KICK], platform="kick", query="xqc")
        from multistream.mcp_server import stream_search
        result = stream_search.fn(query="xqc", platform="kick")
        assert result["count"] == 1
        assert result["streamers"][0]["displayName"] == "xQc"
        assert result["streamers"][0]["embedUrl"] == "https://player.kick.com/xqc"

    def test_forwards_params(self, mock_svc):
        mock_svc.search.return_value = SearchResponse(streamers=[], platform="all", query="x")
        from multistream.mcp_server import stream_search
        stream_search.fn(query="x", limit=6)
        mock_svc.search.assert_called_once_with("all", "x", 6)

    def test_client_error_returns_dict(self, mock_svc):
        mock_svc.search.side_effect = ClientError("invalid platform: must be youtube, kick, or all")
        from multistream.mcp_server import stream_search
        result = stream_search.fn(query="x", platform="twitch")
        assert result["error"] == "invalid_request"

    def test_upstream_error_returns_dict(self, mock_svc):
        mock_svc.search.side_effect = UpstreamError("both down")
        from multistream.mcp_server import stream_search
        assert stream_search.fn(query="x")["error"] == "upstream_error"

    def test_rate_limit_returns_dict(self, mock_svc):
        mock_svc.search.side_effect = RateLimitError("slow down")
        from multistream.mcp_server import stream_search
        assert stream_search.fn(query="x", platform="youtube")["error"] == "rate_limit"


class TestStreamInfo:
    def test_returns_dict(self, mock_svc):
        mock_svc.get_stream.return_value = StreamResponse.from_streamer(KICK)
        from multistream.mcp_server import stream_info
        result = stream_info.fn(platform="kick", stream_id="xqc")
        assert result["streamer"]["id"] == "668"
        assert result["chatUrl"] == "https://kick.com/xqc/chatroom"

    def test_not_found_returns_dict(self, mock_svc):
        mock_svc.get_stream.side_effect = NotFoundError("Kick channel not found: nobody (HTTP 404)")
        from multistream.mcp_server import stream_info
        assert stream_info.fn(platform="kick", stream_id="nobody")["error"] == "not_found"

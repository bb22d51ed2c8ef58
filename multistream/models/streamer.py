from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_serializer
from pydantic.alias_generators import to_camel

Platform = Literal["youtube", "kick"]


def embed_url_for(platform: str, stream_id: str, username: str) -> str:
    """Player URL for a stream. YouTube keys on the video id, Kick on the channel slug."""
    if platform == "youtube":
        return f"https://www.youtube.com/embed/{stream_id}?autoplay=1" if stream_id else ""
    if platform == "kick":
        return f"https://player.kick.com/{username}" if username else ""
    return ""


def chat_url_for(platform: str, stream_id: str, username: str) -> str:
    if platform == "youtube":
        return f"https://www.youtube.com/live_chat?v={stream_id}&embed_domain=localhost" if stream_id else ""
    if platform == "kick":
        return f"https://kick.com/{username}/chatroom" if username else ""
    return ""


class Streamer(BaseModel):
    """One channel or video, normalized across platforms.

    embedUrl and chatUrl are derived from (platform, id, username) and are
    left out of the JSON when empty.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(min_length=1)
    platform: Platform
    username: str = ""
    display_name: str = ""
    thumbnail: str = ""
    title: str = ""
    viewer_count: int = Field(default=0, ge=0)
    is_live: bool = False

    @computed_field(alias="embedUrl")
    @property
    def embed_url(self) -> str:
        return embed_url_for(self.platform, self.id, self.username)

    @computed_field(alias="chatUrl")
    @property
    def chat_url(self) -> str:
        return chat_url_for(self.platform, self.id, self.username)

    @model_serializer(mode="wrap")
    def _omit_empty_urls(self, handler):
        data = handler(self)
        for key in ("embedUrl", "chatUrl", "embed_url", "chat_url"):
            if key in data and not data[key]:
                del data[key]
        return data


class SearchResponse(BaseModel):
    streamers: list[Streamer]
    platform: str
    query: str


class StreamResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    streamer: Streamer
    embed_url: str
    chat_url: str

    @classmethod
    def from_streamer(cls, streamer: Streamer) -> "StreamResponse":
        return cls(streamer=streamer, embed_url=streamer.embed_url, chat_url=streamer.chat_url)

"""Payload shapes returned by the unofficial Kick web API.

Only the fields the normalizer reads are declared; everything else in the
upstream JSON is ignored. Kick sends null for missing values, so every field
apart from the channel id is optional.
"""

from pydantic import BaseModel


class KickCategory(BaseModel):
    name: str | None = None


class KickSearchChannel(BaseModel):
    id: int
    username: str | None = None
    slug: str | None = None
    profile_pic: str | None = None
    is_live: bool | None = None
    viewer_count: int | None = None
    recent_categories: list[KickCategory] | None = None


class KickSearchResponse(BaseModel):
    channels: list[KickSearchChannel] | None = None


class KickUser(BaseModel):
    username: str | None = None
    profile_pic: str | None = None


class KickThumbnail(BaseModel):
    url: str | None = None


class KickLivestream(BaseModel):
    session_title: str | None = None
    is_live: bool | None = None
    viewer_count: int | None = None
    thumbnail: KickThumbnail | None = None


class KickChannel(BaseModel):
    id: int
    slug: str | None = None
    user: KickUser | None = None
    livestream: KickLivestream | None = None
    recent_categories: list[KickCategory] | None = None

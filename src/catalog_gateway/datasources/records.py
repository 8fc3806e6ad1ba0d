"""
Typed records decoded from the upstream catalog REST API
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UpstreamRecord(BaseModel):
    """Base for upstream payloads: camelCase keys on the wire, unknown keys dropped."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class TrackRecord(UpstreamRecord):
    """A track as returned by `GET track/{id}` and `GET tracks`."""

    id: str
    title: str
    author_id: str
    thumbnail: str | None = None
    length: int | None = None
    modules_count: int | None = None
    description: str | None = None
    number_of_views: int | None = None


class AuthorRecord(UpstreamRecord):
    id: str
    name: str
    photo: str | None = None


class ModuleRecord(UpstreamRecord):
    id: str
    title: str
    length: int | None = None
    content: str | None = None
    video_url: str | None = None

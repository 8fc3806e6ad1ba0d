from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...datasources import AuthorRecord, TrackRecord, capture_http_errors
from ...logging import get_logger
from ..context import get_track_api
from .module import module_from_record

if TYPE_CHECKING:
    from ..types.author import Author
    from ..types.module import Module
    from ..types.track import IncrementTrackViewsResponse, Track

logger = get_logger(__name__)


def track_from_record(record: TrackRecord) -> Track:
    from ..types.track import Track as TrackType

    return TrackType(
        id=strawberry.ID(record.id),
        title=record.title,
        author_id=record.author_id,
        thumbnail=record.thumbnail,
        length=record.length,
        modules_count=record.modules_count,
        description=record.description,
        number_of_views=record.number_of_views,
    )


def author_from_record(record: AuthorRecord) -> Author:
    from ..types.author import Author as AuthorType

    return AuthorType(id=strawberry.ID(record.id), name=record.name, photo=record.photo)


# Query resolvers
async def resolve_tracks_for_home(info: strawberry.Info) -> list[Track]:
    """Get the tracks that populate the homepage grid."""
    records = await get_track_api(info).get_tracks_for_home()
    return [track_from_record(record) for record in records]


async def resolve_track_by_id(info: strawberry.Info, id: str) -> Track:
    """Get a single track by ID, for the track page."""
    record = await get_track_api(info).get_track(id)
    return track_from_record(record)


# Field resolvers
async def resolve_track_author(track: Track, info: strawberry.Info) -> Author:
    """Fetch the author referenced by the parent track's authorId."""
    record = await get_track_api(info).get_author(track.author_id)
    return author_from_record(record)


async def resolve_track_modules(track: Track, info: strawberry.Info) -> list[Module]:
    records = await get_track_api(info).get_track_modules(track.id)
    return [module_from_record(record) for record in records]


def resolve_track_duration(track: Track) -> int | None:
    return track.length


# Mutations
async def increment_track_views(info: strawberry.Info, id: str) -> IncrementTrackViewsResponse:
    """Increment a track's view count.

    An upstream HTTP error is reported in the response payload instead of as a
    GraphQL error. Transport failures still surface as field errors.
    """
    from ..types.track import IncrementTrackViewsResponse as ResponseType

    result = await capture_http_errors(get_track_api(info).increment_track_views(id))

    if result.error is not None:
        logger.info(
            "Track view increment rejected by upstream",
            track_id=id,
            status_code=result.error.status,
        )
        return ResponseType(
            code=result.error.status,
            success=False,
            message=result.error.body,
            track=None,
        )

    return ResponseType(
        code=200,
        success=True,
        message=f"Successfully incremented number of views for track {id}",
        track=track_from_record(result.value),  # type: ignore[arg-type]
    )

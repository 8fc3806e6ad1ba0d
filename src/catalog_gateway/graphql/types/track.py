"""
Track GraphQL type definitions
"""

import strawberry

from .author import Author
from .module import Module


@strawberry.type
class Track:
    """A track is a group of Modules that teaches about a specific topic."""

    id: strawberry.ID
    title: str
    author_id: strawberry.Private[str]
    thumbnail: str | None = None
    length: int | None = strawberry.field(
        default=None, deprecation_reason="Use durationInSeconds"
    )
    modules_count: int | None = None
    description: str | None = None
    number_of_views: int | None = None

    @strawberry.field
    async def author(self, info: strawberry.Info) -> Author:
        """The track's main author."""
        from ..resolvers.track import resolve_track_author

        return await resolve_track_author(self, info)

    @strawberry.field
    async def modules(self, info: strawberry.Info) -> list[Module]:
        """The track's complete array of Modules."""
        from ..resolvers.track import resolve_track_modules

        return await resolve_track_modules(self, info)

    @strawberry.field
    def duration_in_seconds(self) -> int | None:
        """The track's approximate length to complete, in seconds."""
        from ..resolvers.track import resolve_track_duration

        return resolve_track_duration(self)


@strawberry.type
class IncrementTrackViewsResponse:
    """Result of incrementTrackViews."""

    code: int = strawberry.field(description="HTTP status code of the upstream update")
    success: bool = strawberry.field(description="Whether the view count was incremented")
    message: str = strawberry.field(description="Human-readable outcome of the update")
    track: Track | None = strawberry.field(
        default=None, description="The updated track, null when the update failed"
    )

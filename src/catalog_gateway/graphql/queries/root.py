"""
Root GraphQL query definitions
"""

import strawberry

from ..types.module import Module
from ..types.track import Track


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def tracks_for_home(self, info: strawberry.Info) -> list[Track]:
        """Get tracks array for homepage grid."""
        from ..resolvers.track import resolve_tracks_for_home

        return await resolve_tracks_for_home(info)

    @strawberry.field
    async def track(self, info: strawberry.Info, id: strawberry.ID) -> Track | None:
        """Fetch a specific track, provided a track's ID."""
        from ..resolvers.track import resolve_track_by_id

        return await resolve_track_by_id(info, id)

    @strawberry.field
    async def module(self, info: strawberry.Info, id: strawberry.ID) -> Module | None:
        """Fetch a specific module, provided a module's ID."""
        from ..resolvers.module import resolve_module_by_id

        return await resolve_module_by_id(info, id)

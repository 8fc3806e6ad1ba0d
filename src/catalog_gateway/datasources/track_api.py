"""
Data source for the Catstronauts catalog REST API
"""

from urllib.parse import quote

from .base import RESTDataSource
from .records import AuthorRecord, ModuleRecord, TrackRecord


def _segment(value: str) -> str:
    """Encode an id as exactly one path segment."""
    encoded = quote(str(value), safe="")
    # Bare dot segments would be resolved away by URL joining
    if encoded in (".", ".."):
        return encoded.replace(".", "%2E")
    return encoded


class TrackAPI(RESTDataSource):
    """One method per catalog endpoint the GraphQL schema needs."""

    async def get_tracks_for_home(self) -> list[TrackRecord]:
        """Get every track shown on the homepage grid."""
        payload = await self.get("tracks")
        return [TrackRecord.model_validate(item) for item in payload]

    async def get_author(self, author_id: str) -> AuthorRecord:
        payload = await self.get(f"author/{_segment(author_id)}")
        return AuthorRecord.model_validate(payload)

    async def get_track(self, track_id: str) -> TrackRecord:
        payload = await self.get(f"track/{_segment(track_id)}")
        return TrackRecord.model_validate(payload)

    async def get_track_modules(self, track_id: str) -> list[ModuleRecord]:
        payload = await self.get(f"track/{_segment(track_id)}/modules")
        return [ModuleRecord.model_validate(item) for item in payload]

    async def get_module(self, module_id: str) -> ModuleRecord:
        payload = await self.get(f"module/{_segment(module_id)}")
        return ModuleRecord.model_validate(payload)

    async def increment_track_views(self, track_id: str) -> TrackRecord:
        """Increment the upstream view counter and return the updated track.

        This is the only call that changes upstream state.
        """
        payload = await self.patch(f"track/{_segment(track_id)}/numberOfViews")
        return TrackRecord.model_validate(payload)

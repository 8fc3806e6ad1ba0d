"""
Module GraphQL type definitions
"""

import strawberry


@strawberry.type
class Module:
    """A Module is a single unit of teaching. Multiple Modules compose a Track."""

    id: strawberry.ID
    title: str
    length: int | None = strawberry.field(
        default=None, deprecation_reason="Use durationInSeconds"
    )
    content: str | None = None
    video_url: str | None = None

    @strawberry.field
    def duration_in_seconds(self) -> int | None:
        """The module's video duration, in seconds."""
        from ..resolvers.module import resolve_module_duration

        return resolve_module_duration(self)

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...datasources import ModuleRecord
from ..context import get_track_api

if TYPE_CHECKING:
    from ..types.module import Module


def module_from_record(record: ModuleRecord) -> Module:
    from ..types.module import Module as ModuleType

    return ModuleType(
        id=strawberry.ID(record.id),
        title=record.title,
        length=record.length,
        content=record.content,
        video_url=record.video_url,
    )


# Query resolvers
async def resolve_module_by_id(info: strawberry.Info, id: str) -> Module:
    """Get a single module by ID, for the module detail page."""
    record = await get_track_api(info).get_module(id)
    return module_from_record(record)


# Field resolvers
def resolve_module_duration(module: Module) -> int | None:
    return module.length

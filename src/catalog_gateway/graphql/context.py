"""
Per-request GraphQL context
"""

import strawberry
from strawberry.fastapi import BaseContext

from ..datasources import TrackAPI


class GatewayContext(BaseContext):
    """Context handed to every resolver of one GraphQL operation."""

    def __init__(self, track_api: TrackAPI):
        super().__init__()
        self.track_api = track_api


def get_track_api(info: strawberry.Info) -> TrackAPI:
    """Return the upstream catalog client bound to this operation."""
    context = info.context
    if not isinstance(context, GatewayContext):
        raise RuntimeError("GraphQL context does not provide a track API")
    return context.track_api

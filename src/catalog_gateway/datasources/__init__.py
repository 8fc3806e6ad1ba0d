"""Upstream REST data sources."""

from .base import (
    RESTDataSource,
    UpstreamError,
    UpstreamHTTPError,
    UpstreamResult,
    UpstreamTransportError,
    capture_http_errors,
    create_http_client,
)
from .records import AuthorRecord, ModuleRecord, TrackRecord
from .track_api import TrackAPI

__all__ = [
    "AuthorRecord",
    "ModuleRecord",
    "RESTDataSource",
    "TrackAPI",
    "TrackRecord",
    "UpstreamError",
    "UpstreamHTTPError",
    "UpstreamResult",
    "UpstreamTransportError",
    "capture_http_errors",
    "create_http_client",
]

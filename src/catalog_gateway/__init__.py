"""
Catalog Gateway
GraphQL gateway over the Catstronauts track catalog REST API
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]

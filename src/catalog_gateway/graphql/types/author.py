"""
Author GraphQL type definitions
"""

import strawberry


@strawberry.type
class Author:
    """Author of a complete Track."""

    id: strawberry.ID
    name: str
    photo: str | None = None

"""
User GraphQL type definitions
"""

import strawberry


@strawberry.type
class User:
    """User type for GraphQL API."""

    id: strawberry.ID
    first_name: str
    last_name: str

    @strawberry.field
    def full_name(self) -> str:
        """First and last name joined by a single space."""
        from ..resolvers.user import resolve_user_full_name

        return resolve_user_full_name(self)

"""
User repository - encapsulates all user data access (SOLID: Single Responsibility).
"""

from sqlalchemy import select

from thingful.db.models.user import User
from thingful.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User-specific queries against ``thingful_users``."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_user_name(self, user_name: str) -> User | None:
        result = await self.session.execute(select(User).where(User.user_name == user_name))
        return result.scalar_one_or_none()

    async def exists(self, user_name: str) -> bool:
        """True if a user with exactly this ``user_name`` is stored (case-sensitive)."""
        result = await self.session.execute(
            select(User.id).where(User.user_name == user_name).limit(1)
        )
        return result.first() is not None

    async def insert(
        self,
        *,
        user_name: str,
        full_name: str,
        password_hash: str,
        nick_name: str | None = None,
    ) -> User:
        """Insert a user row. Raises ``IntegrityError`` if ``user_name`` is taken."""
        user = User(
            user_name=user_name,
            full_name=full_name,
            nick_name=nick_name,
            password_hash=password_hash,
        )
        return await self.add(user)

"""
User service - registration business logic (SOLID: Single Responsibility).
Challenge: Validate before any write; keep controllers thin.
Design: Service depends on the repository abstraction; easy to test with mocks.
"""

import logging

import bleach
from sqlalchemy.exc import IntegrityError

from thingful.core.errors import PasswordPolicyError, UsernameTakenError, UserNotFoundError
from thingful.core.security import hash_password
from thingful.db.models.user import User
from thingful.db.repositories.user_repository import UserRepository
from thingful.schemas.user import UserCreate, UserResponse
from thingful.services.password_policy import validate_password

logger = logging.getLogger(__name__)


def _neutralize_markup(value: str) -> str:
    """Escape disallowed tags but leave ampersands as typed (``tom&jerry`` stays as is)."""
    # bleach only emits &amp; for a bare "&"; markup it escapes uses &lt; and &gt;.
    return bleach.clean(value).replace("&amp;", "&")


def serialize_user(user: User) -> UserResponse:
    """Public view of a stored user: free text escaped, no password material."""
    data = {
        "id": user.id,
        "full_name": _neutralize_markup(user.full_name),
        "user_name": _neutralize_markup(user.user_name),
        "date_created": user.date_created,
    }
    if user.nick_name:
        data["nickname"] = _neutralize_markup(user.nick_name)
    return UserResponse(**data)


class UserService:
    """Handles user use cases: registration and lookup."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register(self, data: UserCreate) -> User:
        """
        Validate the password, check the name is free, hash, insert.
        Raises a ``ServiceError`` subclass at the first failing stage; nothing is
        written unless every check passes.
        """
        reason = validate_password(data.password)
        if reason:
            logger.info("Registration rejected: %s", reason)
            raise PasswordPolicyError(reason)

        if await self.user_repo.exists(data.user_name):
            logger.info("Registration rejected: username taken")
            raise UsernameTakenError()

        password_hash = await hash_password(data.password)

        try:
            user = await self.user_repo.insert(
                user_name=data.user_name,
                full_name=data.full_name,
                nick_name=data.nickname or None,
                password_hash=password_hash,
            )
        except IntegrityError:
            # Lost a race with a concurrent registration, or a different constraint failed.
            await self.user_repo.rollback()
            if await self.user_repo.get_by_user_name(data.user_name) is not None:
                logger.warning("Concurrent registration for the same username detected")
                raise UsernameTakenError() from None
            raise

        logger.info("Registered user id=%s", user.id)
        return user

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

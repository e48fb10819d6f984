"""
User service tests - the registration pipeline and its short-circuits.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy import func, select

from thingful.core.errors import PasswordPolicyError, UsernameTakenError, UserNotFoundError
from thingful.core.security import verify_password
from thingful.db.models.user import User
from thingful.db.repositories.user_repository import UserRepository
from thingful.schemas.user import UserCreate
from thingful.services.user_service import UserService

PASSWORD = "aadsi8d!!%%s78dSd"


async def count_users(session) -> int:
    return (await session.execute(select(func.count(User.id)))).scalar_one()


@pytest.mark.asyncio
async def test_register_stores_hashed_password(session):
    svc = UserService(UserRepository(session))
    user = await svc.register(
        UserCreate(user_name="apple", password=PASSWORD, full_name="Apples Apples", nickname="Appy")
    )

    assert user.id is not None
    assert user.nick_name == "Appy"
    assert user.password_hash != PASSWORD
    assert verify_password(PASSWORD, user.password_hash)


@pytest.mark.asyncio
async def test_empty_nickname_stored_as_null(session):
    svc = UserService(UserRepository(session))
    user = await svc.register(
        UserCreate(user_name="apple", password=PASSWORD, full_name="Apples Apples", nickname="")
    )
    assert user.nick_name is None


@pytest.mark.asyncio
async def test_policy_violation_writes_nothing_and_skips_hashing(session):
    repo = UserRepository(session)
    svc = UserService(repo)
    with patch("thingful.services.user_service.hash_password", AsyncMock()) as hasher:
        with pytest.raises(PasswordPolicyError) as exc_info:
            await svc.register(UserCreate(user_name="apple", password="abcdefg", full_name="A"))

    assert exc_info.value.reason == "Password must be at least 8 characters"
    hasher.assert_not_awaited()
    assert await count_users(session) == 0


@pytest.mark.asyncio
async def test_duplicate_user_name_rejected_before_hashing(session, test_user):
    svc = UserService(UserRepository(session))
    with patch("thingful.services.user_service.hash_password", AsyncMock()) as hasher:
        with pytest.raises(UsernameTakenError) as exc_info:
            await svc.register(
                UserCreate(user_name="test-user-1", password=PASSWORD, full_name="Other")
            )

    assert exc_info.value.reason == "Username already taken"
    hasher.assert_not_awaited()
    assert await count_users(session) == 1


@pytest.mark.asyncio
async def test_race_on_insert_reported_as_username_taken(session, test_user):
    """The existence check passes but a concurrent insert already claimed the name."""
    repo = UserRepository(session)
    svc = UserService(repo)
    with patch.object(repo, "exists", AsyncMock(return_value=False)):
        with pytest.raises(UsernameTakenError):
            await svc.register(
                UserCreate(user_name="test-user-1", password=PASSWORD, full_name="Other")
            )

    assert await count_users(session) == 1


@pytest.mark.asyncio
async def test_get_user(session, test_user):
    svc = UserService(UserRepository(session))
    user = await svc.get_user(test_user.id)
    assert user.user_name == "test-user-1"

    with pytest.raises(UserNotFoundError):
        await svc.get_user(test_user.id + 100)

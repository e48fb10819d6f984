"""
User endpoints - registration and lookup (RESTful API).
Design: Thin controller; service layer holds business logic.
"""

from fastapi import APIRouter, Response, status

from thingful.core.errors import MissingFieldError
from thingful.db.repositories.user_repository import UserRepository
from thingful.db.session import DbSession
from thingful.schemas.user import UserCreate, UserResponse
from thingful.services.user_service import UserService, serialize_user

router = APIRouter()


def _get_user_service(session: DbSession) -> UserService:
    """Factory for service with repository injection (Dependency Inversion)."""
    return UserService(UserRepository(session))


@router.post(
    "",
    response_model=UserResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(session: DbSession, data: UserCreate, response: Response):
    """Create a new user. Returns the public view and its location."""
    missing = data.missing_field()
    if missing:
        raise MissingFieldError(missing)
    svc = _get_user_service(session)
    user = await svc.register(data)
    response.headers["Location"] = f"/api/users/{user.id}"
    return serialize_user(user)


@router.get("/{user_id}", response_model=UserResponse, response_model_exclude_unset=True)
async def get_user(session: DbSession, user_id: int):
    """Public view of a single user; 404 if there is none."""
    svc = _get_user_service(session)
    return serialize_user(await svc.get_user(user_id))

"""User request/response schemas - API contract."""

from datetime import datetime

from pydantic import BaseModel

# Checked in this order; the first absent field is reported.
REQUIRED_FIELDS = ("user_name", "password", "full_name")


class UserCreate(BaseModel):
    # Declared optional so a missing field yields our 400 message rather than a 422.
    user_name: str | None = None
    password: str | None = None
    full_name: str | None = None
    nickname: str | None = None

    def missing_field(self) -> str | None:
        """Name of the first required field that is absent or empty."""
        for field in REQUIRED_FIELDS:
            if not getattr(self, field):
                return field
        return None


class UserResponse(BaseModel):
    id: int
    full_name: str
    user_name: str
    # Left unset (not None) when the user has no nickname; rendered with exclude_unset.
    nickname: str | None = None
    date_created: datetime

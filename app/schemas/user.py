import re
from datetime import datetime

from pydantic import Field, validator

from app.schemas.base import CamelModel

PHONE_NUMBER_PATTERN = re.compile(r"^[\d\s\-\+\(\)]+$")


def _required(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValueError(message)
    return value.strip()


class UserBase(CamelModel):
    name: str = Field(..., description="Full name of the participant")
    school: str = Field(..., description="School the participant attends")
    phone_number: str = Field(..., max_length=50, description="Contact phone number")


class UserCreate(UserBase):
    @validator("name")
    def validate_name(cls, v):
        return _required(v, "Name is required")

    @validator("school")
    def validate_school(cls, v):
        return _required(v, "School is required")

    @validator("phone_number")
    def validate_phone_number(cls, v):
        v = _required(v, "Phone number is required")
        if not PHONE_NUMBER_PATTERN.match(v):
            raise ValueError("Please enter a valid phone number")
        return v


class UserPublic(UserBase):
    """User fields safe to return to the client"""

    id: str


class UserRead(UserPublic):
    created_at: datetime

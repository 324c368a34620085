# File: goraeph/schemas/user.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON uses camelCase (isActivated); python code uses snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserBase(CamelModel):
    username: str = Field(min_length=1, max_length=50)
    email: EmailStr


class UserCreate(UserBase):
    password: str = Field(min_length=1, max_length=255)
    is_activated: StrictBool


class UserUpdate(CamelModel):
    """
    Partial update. Omitted fields are left unchanged; explicit nulls are rejected.
    """

    username: Optional[str] = Field(default=None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=1, max_length=255)
    is_activated: Optional[StrictBool] = None

    @field_validator("username", "email", "password", "is_activated")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class UserRead(UserBase):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    is_activated: bool
    created_at: datetime
    updated_at: datetime

"""User Schemas — registration, login, profile and user detail payloads.

Invariants:
    - Passwords are accepted on input only; no response schema has a password field
    - ProfileUpdate.availability, when present, is exactly 3x7
    - Multi-select profile fields only accept the known vocabularies
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from skillswap.core.domain_types import (
    AVAILABILITY_DAYS, AVAILABILITY_TIMESLOTS,
    LearningIntensity, LearningMode, TeachingStyle,
)


class UserRegister(BaseModel):
    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_.-]+$")
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    profile_picture: str | None = Field(None, max_length=2000)
    location: str | None = Field(None, max_length=200)
    timezone: str | None = Field(None, max_length=100)
    bio: str | None = Field(None, max_length=2000)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.strip().lower()


class UserLogin(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Public user data — password hash never included."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    display_name: str
    first_name: str | None = None
    last_name: str | None = None
    profile_picture: str | None = None
    location: str | None = None
    timezone: str | None = None
    bio: str | None = None
    created_at: datetime


class ProfileUpdate(BaseModel):
    """Full or partial profile; omitted (null) fields keep their stored value."""
    learning_modes: list[LearningMode] | None = None
    availability: list[list[bool]] | None = None
    learning_goals: str | None = Field(None, max_length=2000)
    learning_intensity: LearningIntensity | None = None
    teaching_styles: list[TeachingStyle] | None = None
    motivation: str | None = Field(None, max_length=2000)

    @field_validator("availability")
    @classmethod
    def check_grid_shape(cls, v: list[list[bool]] | None) -> list[list[bool]] | None:
        if v is None:
            return v
        rows, cols = len(AVAILABILITY_TIMESLOTS), len(AVAILABILITY_DAYS)
        if len(v) != rows or any(len(row) != cols for row in v):
            raise ValueError(f"availability must be {rows} timeslots x {cols} days")
        return v

    def to_fields(self) -> dict:
        """Plain values for UserDirectory.update_profile (enums flattened)."""
        return self.model_dump(mode="json")


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    learning_modes: list[str]
    availability: list[list[bool]]
    learning_goals: str | None = None
    learning_intensity: str | None = None
    teaching_styles: list[str]
    motivation: str | None = None
    created_at: datetime


class RatingSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    count: int
    average: float | None = None


class UserEnvelope(BaseModel):
    user: UserResponse


class UserDetailEnvelope(BaseModel):
    user: UserResponse
    profile: ProfileResponse | None = None
    rating: RatingSummaryResponse


class ProfileEnvelope(BaseModel):
    profile: ProfileResponse

"""Skill Schemas — taught skills and learning interests."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skillswap.core.domain_types import InterestLevel, SkillLevel


def _strip_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


class SkillCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    level: SkillLevel

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)


class InterestCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    level: InterestLevel

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_name(v)


class SkillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    level: SkillLevel
    created_at: datetime


class InterestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    name: str
    level: InterestLevel
    created_at: datetime


class SkillEnvelope(BaseModel):
    skill: SkillResponse


class SkillListEnvelope(BaseModel):
    skills: list[SkillResponse]


class InterestEnvelope(BaseModel):
    interest: InterestResponse


class InterestListEnvelope(BaseModel):
    interests: list[InterestResponse]

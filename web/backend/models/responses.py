#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class UserOut(CamelResponse):
    """Public user representation; level is derived from points."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "john_doe",
                "email": "john@company.com",
                "name": "John Doe",
                "role": "Software Engineer",
                "level": 13,
                "points": 1250,
                "avatar": None
            }
        }
    )

    id: int
    username: str
    email: str
    name: str
    role: str
    level: int = Field(ge=1)
    points: int
    avatar: Optional[str] = None


class SkillOut(CamelResponse):
    id: int
    user_id: int
    name: str
    category: str
    proficiency: str
    endorsement_count: int = Field(ge=0)
    source: str
    created_at: Optional[datetime] = None


class EndorsementOut(CamelResponse):
    id: int
    skill_id: int
    endorser_id: int
    endorsee_id: int
    comment: Optional[str] = None
    created_at: Optional[datetime] = None


class EndorsementDetail(EndorsementOut):
    """Endorsement with the related users and skill attached."""
    endorser: Optional[UserOut] = None
    endorsee: Optional[UserOut] = None
    skill: Optional[SkillOut] = None


class AchievementOut(CamelResponse):
    id: int
    user_id: int
    type: str
    title: str
    description: str
    points: int = Field(ge=0)
    created_at: Optional[datetime] = None


class EndorserStandingOut(UserOut):
    """User with the number of endorsements they have given."""
    endorsement_count: int = Field(ge=0)


class UserStatsOut(CamelResponse):
    total_skills: int
    total_endorsements_received: int
    points: int
    level: int
    rank: int


class SuccessResponse(BaseModel):
    success: bool = True

#!/usr/bin/env python3
"""
Request models for API endpoints.

Fields are camelCase on the wire (``userId``); snake_case is accepted too.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from database.models import Proficiency


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(CamelModel):
    """Request to register a user."""
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)


class SkillCreate(CamelModel):
    """Request to add one skill."""
    user_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    proficiency: Proficiency = Field(..., description="Beginner, Intermediate, Advanced or Expert")
    source: Optional[str] = Field(default=None, description="Provenance tag, defaults to 'manual'")


class BulkSkillItem(CamelModel):
    """One item of a bulk skill import; userId is optional when given on the batch."""
    user_id: Optional[int] = Field(default=None, ge=1)
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    proficiency: Proficiency
    source: Optional[str] = None


class BulkSkillCreate(CamelModel):
    """Request to add several skills for one owner, all or nothing."""
    user_id: Optional[int] = Field(default=None, ge=1)
    skills: List[BulkSkillItem]


class SkillUpdate(CamelModel):
    """Editable skill fields. Endorsement counts and ownership are not editable."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='forbid')

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    proficiency: Optional[Proficiency] = None
    source: Optional[str] = None


class EndorsementCreate(CamelModel):
    """Request to endorse a skill."""
    skill_id: int = Field(..., ge=1)
    endorser_id: int = Field(..., ge=1)
    endorsee_id: int = Field(..., ge=1)
    comment: Optional[str] = None


class AchievementCreate(CamelModel):
    """Request to grant an achievement."""
    user_id: int = Field(..., ge=1)
    type: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str
    points: Optional[int] = Field(default=None, ge=0, description="Bonus points, defaults to 0")

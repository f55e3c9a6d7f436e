#!/usr/bin/env python3
"""
Skill endpoints - list, add (single and bulk), edit and delete skills.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends

from core.app_context import AppContext
from core.errors import InvalidInputError
from ..dependencies import get_app_context, unit_of_work, scoring_engine
from ..models.requests import SkillCreate, BulkSkillCreate, SkillUpdate
from ..models.responses import SkillOut, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/skills", tags=["skills"])


@router.get("", response_model=List[SkillOut])
def list_skills(context: AppContext = Depends(get_app_context)):
    with unit_of_work(context) as store:
        return [SkillOut.model_validate(s) for s in store.skills.list()]


@router.get("/user/{user_id}", response_model=List[SkillOut])
def list_user_skills(user_id: int, context: AppContext = Depends(get_app_context)):
    """Skills owned by one user (empty for unknown users)."""
    with unit_of_work(context) as store:
        return [SkillOut.model_validate(s) for s in store.skills.list_for_user(user_id)]


@router.post("", response_model=SkillOut, status_code=201)
def add_skill(
    payload: SkillCreate,
    context: AppContext = Depends(get_app_context)
):
    """Add a skill and award the owner points for it."""
    with unit_of_work(context) as store:
        skill = scoring_engine(store, context).add_skill(
            user_id=payload.user_id,
            name=payload.name,
            category=payload.category,
            proficiency=payload.proficiency,
            source=payload.source
        )
        return SkillOut.model_validate(skill)


@router.post("/bulk", response_model=List[SkillOut], status_code=201)
def add_skills_bulk(
    payload: BulkSkillCreate,
    context: AppContext = Depends(get_app_context)
):
    """
    Add several skills for one owner in a single step.

    The owner is the batch ``userId`` or, when absent, the first item's.
    Either every skill is created and points are awarded once, or nothing
    changes.
    """
    if not payload.skills and payload.user_id is None:
        return []

    user_id = payload.user_id if payload.user_id is not None else payload.skills[0].user_id
    if user_id is None:
        raise InvalidInputError.for_field("userId", "field required")

    items = [item.model_dump(exclude_none=True) for item in payload.skills]
    with unit_of_work(context) as store:
        skills = scoring_engine(store, context).add_skills_bulk(user_id, items)
        return [SkillOut.model_validate(s) for s in skills]


@router.put("/{skill_id}", response_model=SkillOut)
def update_skill(
    skill_id: int,
    payload: SkillUpdate,
    context: AppContext = Depends(get_app_context)
):
    """Edit name, category, proficiency or source of a skill."""
    with unit_of_work(context) as store:
        skill = scoring_engine(store, context).update_skill(skill_id, payload.model_dump(exclude_unset=True))
        return SkillOut.model_validate(skill)


@router.delete("/{skill_id}", response_model=SuccessResponse)
def delete_skill(
    skill_id: int,
    context: AppContext = Depends(get_app_context)
):
    """Delete a skill and its endorsements. Points already awarded are kept."""
    with unit_of_work(context) as store:
        scoring_engine(store, context).delete_skill(skill_id)
    return SuccessResponse(success=True)

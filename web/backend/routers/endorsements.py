#!/usr/bin/env python3
"""
Endorsement endpoints - view, give and remove endorsements.
"""

import logging
from typing import List
from fastapi import APIRouter, Depends

from core.app_context import AppContext
from ..dependencies import get_app_context, unit_of_work, scoring_engine
from ..models.requests import EndorsementCreate
from ..models.responses import EndorsementDetail, EndorsementOut, SuccessResponse
from ..services.endorsement_service import EndorsementService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/endorsements", tags=["endorsements"])


@router.get("/user/{user_id}", response_model=List[EndorsementDetail], response_model_exclude_none=True)
def get_endorsements_received(user_id: int, context: AppContext = Depends(get_app_context)):
    """Endorsements received by a user, each with its endorser and skill."""
    with unit_of_work(context) as store:
        return EndorsementService(store).received_by(user_id)


@router.get("/given/{user_id}", response_model=List[EndorsementDetail], response_model_exclude_none=True)
def get_endorsements_given(user_id: int, context: AppContext = Depends(get_app_context)):
    """Endorsements given by a user, each with its endorsee and skill."""
    with unit_of_work(context) as store:
        return EndorsementService(store).given_by(user_id)


@router.get("/skill/{skill_id}", response_model=List[EndorsementDetail], response_model_exclude_none=True)
def get_skill_endorsements(skill_id: int, context: AppContext = Depends(get_app_context)):
    """Endorsements of one skill, each with its endorser."""
    with unit_of_work(context) as store:
        return EndorsementService(store).for_skill(skill_id)


@router.post("", response_model=EndorsementOut, status_code=201)
def endorse_skill(
    payload: EndorsementCreate,
    context: AppContext = Depends(get_app_context)
):
    """Endorse a skill; the endorser and endorsee both earn points."""
    with unit_of_work(context) as store:
        endorsement = scoring_engine(store, context).endorse_skill(
            skill_id=payload.skill_id,
            endorser_id=payload.endorser_id,
            endorsee_id=payload.endorsee_id,
            comment=payload.comment
        )
        return EndorsementOut.model_validate(endorsement)


@router.delete("/{endorsement_id}", response_model=SuccessResponse)
def remove_endorsement(
    endorsement_id: int,
    context: AppContext = Depends(get_app_context)
):
    with unit_of_work(context) as store:
        scoring_engine(store, context).remove_endorsement(endorsement_id)
    return SuccessResponse(success=True)

#!/usr/bin/env python3
"""
Endorsement views - endorsements joined with the users and skills they reference.
"""

import logging
from typing import Dict, List, Optional

from database.models import Endorsement
from database.repository import EntityStore
from ..models.responses import EndorsementDetail, SkillOut, UserOut

logger = logging.getLogger(__name__)


class EndorsementService:
    """Read-side joins over the Entity Store. One instance per request."""

    def __init__(self, store: EntityStore):
        self.store = store
        self._users: Dict[int, Optional[UserOut]] = {}
        self._skills: Dict[int, Optional[SkillOut]] = {}

    def received_by(self, user_id: int) -> List[EndorsementDetail]:
        """Endorsements a user received, with endorser and skill attached."""
        endorsements = self.store.endorsements.list_received_by(user_id)
        return [self._to_detail(e, include_endorser=True, include_skill=True) for e in endorsements]

    def given_by(self, user_id: int) -> List[EndorsementDetail]:
        """Endorsements a user gave, with endorsee and skill attached."""
        endorsements = self.store.endorsements.list_given_by(user_id)
        return [self._to_detail(e, include_endorsee=True, include_skill=True) for e in endorsements]

    def for_skill(self, skill_id: int) -> List[EndorsementDetail]:
        """Endorsements of one skill, with endorser attached."""
        endorsements = self.store.endorsements.list_for_skill(skill_id)
        return [self._to_detail(e, include_endorser=True) for e in endorsements]

    def _user(self, user_id: int) -> Optional[UserOut]:
        if user_id not in self._users:
            user = self.store.users.get(user_id)
            self._users[user_id] = UserOut.model_validate(user) if user else None
        return self._users[user_id]

    def _skill(self, skill_id: int) -> Optional[SkillOut]:
        if skill_id not in self._skills:
            skill = self.store.skills.get(skill_id)
            self._skills[skill_id] = SkillOut.model_validate(skill) if skill else None
        return self._skills[skill_id]

    def _to_detail(
        self,
        endorsement: Endorsement,
        include_endorser: bool = False,
        include_endorsee: bool = False,
        include_skill: bool = False
    ) -> EndorsementDetail:
        detail = EndorsementDetail.model_validate(endorsement)
        if include_endorser:
            detail.endorser = self._user(endorsement.endorser_id)
        if include_endorsee:
            detail.endorsee = self._user(endorsement.endorsee_id)
        if include_skill:
            detail.skill = self._skill(endorsement.skill_id)
        return detail

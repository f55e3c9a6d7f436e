#!/usr/bin/env python3
"""
Scoring Engine - every mutation that moves points or endorsement counts.

Each operation validates its input, resolves the entities it references,
and only then writes: the new record, the derived counters and the point
awards all land in the caller's unit of work together. Run operations
inside ``store_uow()`` so that commit and rollback cover the whole step.

Point awards are one-time credits. Deleting a skill or removing an
endorsement does not reverse the points granted when it was created.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.config_loader import ScoringConfig
from core.errors import InvalidInputError, NotFoundError
from core.scoring import validation
from database.models import Achievement, Endorsement, Skill, User
from database.repository import EntityStore

logger = logging.getLogger(__name__)


class ScoringEngine:
    """Applies point, count and record mutations as single consistent steps."""

    def __init__(self, store: EntityStore, config: Optional[ScoringConfig] = None):
        self.store = store
        self.config = config or ScoringConfig()

    # ============ Users ============

    def create_user(self, username: str, email: str, name: str, role: str) -> User:
        fields = validation.validate_user(username, email, name, role)

        errors = []
        if self.store.users.get_by_username(fields['username']) is not None:
            errors.append({"field": "username", "message": "already taken"})
        if self.store.users.get_by_email(fields['email']) is not None:
            errors.append({"field": "email", "message": "already registered"})
        if errors:
            raise InvalidInputError("Invalid user data", errors)

        user = self.store.users.create(points=0, **fields)
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    # ============ Skills ============

    def add_skill(
        self,
        user_id: int,
        name: str,
        category: str,
        proficiency: str,
        source: Optional[str] = None
    ) -> Skill:
        validation.check_id(user_id, "userId")
        fields = validation.validate_skill(name, category, proficiency, source)
        user = self._require_user(user_id)

        skill = self.store.skills.create(user_id=user.id, endorsement_count=0, **fields)
        self.store.users.add_points(user, self.config.skill_added_points)

        logger.info(
            f"User {user.id} added skill {skill.id} ({skill.name}): "
            f"+{self.config.skill_added_points} points"
        )
        return skill

    def add_skills_bulk(self, user_id: int, skills: Sequence[Mapping[str, Any]]) -> List[Skill]:
        """
        Create every skill in ``skills`` for one owner, or none of them.

        All items are validated before the first insert. The owner receives
        a single award of ``skill_added_points * len(skills)``.
        """
        validation.check_id(user_id, "userId")
        items = validation.validate_skill_batch(user_id, skills)
        user = self._require_user(user_id)

        created = [
            self.store.skills.create(user_id=user.id, endorsement_count=0, **fields)
            for fields in items
        ]

        award = self.config.skill_added_points * len(created)
        if award:
            self.store.users.add_points(user, award)

        logger.info(f"User {user.id} bulk-added {len(created)} skills: +{award} points")
        return created

    def update_skill(self, skill_id: int, updates: Mapping[str, Any]) -> Skill:
        """Shallow-merge caller-editable fields; counts and ownership are not editable."""
        validation.check_id(skill_id, "skillId")
        clean = validation.validate_skill_updates(updates)
        self._require_skill(skill_id)
        return self.store.skills.update(skill_id, clean)

    def delete_skill(self, skill_id: int) -> int:
        """
        Delete a skill together with the endorsements that reference it.

        Returns the number of endorsements removed. Points are not reversed.
        """
        validation.check_id(skill_id, "skillId")
        skill = self._require_skill(skill_id)

        removed = self.store.endorsements.delete_for_skill(skill.id)
        self.store.skills.delete(skill.id)

        logger.info(f"Deleted skill {skill_id} and {removed} endorsements (no point reversal)")
        return removed

    # ============ Endorsements ============

    def endorse_skill(
        self,
        skill_id: int,
        endorser_id: int,
        endorsee_id: int,
        comment: Optional[str] = None
    ) -> Endorsement:
        validation.check_id(skill_id, "skillId")
        validation.check_id(endorser_id, "endorserId")
        validation.check_id(endorsee_id, "endorseeId")
        comment = validation.validate_comment(comment)

        skill = self._require_skill(skill_id)
        endorser = self._require_user(endorser_id)
        endorsee = self._require_user(endorsee_id)

        endorsement = self.store.endorsements.create(
            skill_id=skill.id,
            endorser_id=endorser.id,
            endorsee_id=endorsee.id,
            comment=comment
        )
        skill.endorsement_count = (skill.endorsement_count or 0) + 1
        self.store.users.add_points(endorser, self.config.endorsement_given_points)
        self.store.users.add_points(endorsee, self.config.endorsement_received_points)

        logger.info(
            f"User {endorser.id} endorsed skill {skill.id} of user {endorsee.id}: "
            f"+{self.config.endorsement_given_points} / +{self.config.endorsement_received_points} points"
        )
        return endorsement

    def remove_endorsement(self, endorsement_id: int) -> None:
        """Delete an endorsement and decrement its skill's count, floored at 0."""
        validation.check_id(endorsement_id, "endorsementId")
        endorsement = self.store.endorsements.get(endorsement_id)
        if endorsement is None:
            raise NotFoundError("Endorsement", endorsement_id)

        skill = self.store.skills.get(endorsement.skill_id)
        self.store.endorsements.delete(endorsement.id)
        if skill is not None and skill.endorsement_count > 0:
            skill.endorsement_count -= 1
            self.store.db.flush()

        logger.info(f"Removed endorsement {endorsement_id} (no point reversal)")

    # ============ Achievements ============

    def grant_achievement(
        self,
        user_id: int,
        type: str,
        title: str,
        description: str,
        points: Optional[int] = None
    ) -> Achievement:
        validation.check_id(user_id, "userId")
        fields = validation.validate_achievement(type, title, description, points)
        user = self._require_user(user_id)

        achievement = self.store.achievements.create(user_id=user.id, **fields)
        if achievement.points:
            self.store.users.add_points(user, achievement.points)

        logger.info(f"Granted achievement {achievement.id} to user {user.id}: +{achievement.points} points")
        return achievement

    # ============ Helpers ============

    def _require_user(self, user_id: int) -> User:
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def _require_skill(self, skill_id: int) -> Skill:
        skill = self.store.skills.get(skill_id)
        if skill is None:
            raise NotFoundError("Skill", skill_id)
        return skill

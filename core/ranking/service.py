#!/usr/bin/env python3
"""
Ranking Service - leaderboards and per-user standing.

All methods are pure reads over the Entity Store. Orderings are total:
points (or endorsements given) descending, then user id ascending, so
equal scores always rank the lower identifier first.
"""

import logging
from typing import List, Optional

from sqlalchemy import select, func, desc

from core.errors import InvalidInputError, NotFoundError
from core.levels import level_for_points
from core.ranking.models import EndorserStanding, UserStats
from database.models import Endorsement, Skill, User
from database.repository import EntityStore

logger = logging.getLogger(__name__)


def _check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidInputError.for_field("limit", "must be a non-negative integer")
    return limit


class RankingService:
    """Read-only derived views: rank, leaderboards, user stats."""

    def __init__(self, store: EntityStore):
        self.store = store
        self.db = store.db

    def _users_by_points(self, limit: Optional[int] = None):
        stmt = select(User).order_by(desc(User.points), User.id)
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).scalars().all()

    def rank_of(self, user_id: int) -> int:
        """1-based position of the user in the points ordering."""
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        # Users strictly ahead: more points, or equal points and a lower id
        stmt = select(func.count(User.id)).where(
            (User.points > user.points)
            | ((User.points == user.points) & (User.id < user.id))
        )
        return self.db.execute(stmt).scalar_one() + 1

    def top_by_points(self, limit: int) -> List[User]:
        limit = _check_limit(limit)
        if limit == 0:
            return []
        return list(self._users_by_points(limit))

    def top_endorsers(self, limit: int) -> List[EndorserStanding]:
        """Users ordered by endorsements given; users who gave none count as 0."""
        limit = _check_limit(limit)
        if limit == 0:
            return []

        given = func.count(Endorsement.id).label('given')
        stmt = (
            select(User, given)
            .outerjoin(Endorsement, Endorsement.endorser_id == User.id)
            .group_by(User.id)
            .order_by(desc(given), User.id)
            .limit(limit)
        )
        rows = self.db.execute(stmt).all()
        return [EndorserStanding(user=user, endorsement_count=count) for user, count in rows]

    def user_stats(self, user_id: int) -> UserStats:
        """
        Summary for one user.

        ``total_endorsements_received`` is the sum of ``endorsement_count``
        over the user's skills.
        """
        user = self.store.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)

        stmt = select(
            func.count(Skill.id),
            func.coalesce(func.sum(Skill.endorsement_count), 0)
        ).where(Skill.user_id == user.id)
        total_skills, total_received = self.db.execute(stmt).one()

        return UserStats(
            total_skills=total_skills,
            total_endorsements_received=int(total_received),
            points=user.points,
            level=level_for_points(user.points),
            rank=self.rank_of(user.id)
        )

import logging

from sqlalchemy.orm import Session

from database.repositories import (
    UserRepository,
    SkillRepository,
    EndorsementRepository,
    AchievementRepository,
)

logger = logging.getLogger(__name__)


class EntityStore:
    """
    The four entity repositories bound to a single Session.

    Obtain one through ``store_uow()`` so that every change made through it
    commits or rolls back together.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.skills = SkillRepository(db)
        self.endorsements = EndorsementRepository(db)
        self.achievements = AchievementRepository(db)

    def is_empty(self) -> bool:
        return self.users.count() == 0

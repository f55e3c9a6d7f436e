import logging
from typing import List

from sqlalchemy import select, func

from database.models import Endorsement
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class EndorsementRepository(BaseRepository[Endorsement]):
    model = Endorsement

    def list_for_skill(self, skill_id: int) -> List[Endorsement]:
        return self.list_by('skill_id', skill_id)

    def list_given_by(self, user_id: int) -> List[Endorsement]:
        return self.list_by('endorser_id', user_id)

    def list_received_by(self, user_id: int) -> List[Endorsement]:
        return self.list_by('endorsee_id', user_id)

    def count_for_skill(self, skill_id: int) -> int:
        stmt = select(func.count(Endorsement.id)).where(Endorsement.skill_id == skill_id)
        return self.db.execute(stmt).scalar_one()

    def delete_for_skill(self, skill_id: int) -> int:
        endorsements = self.list_for_skill(skill_id)
        for endorsement in endorsements:
            self.db.delete(endorsement)
        if endorsements:
            self.db.flush()
            logger.info(f"Deleted {len(endorsements)} endorsements for skill {skill_id}")
        return len(endorsements)

from typing import List

from database.models import Skill
from database.repositories.base import BaseRepository


class SkillRepository(BaseRepository[Skill]):
    model = Skill

    def list_for_user(self, user_id: int) -> List[Skill]:
        return self.list_by('user_id', user_id)

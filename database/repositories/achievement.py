from typing import List

from database.models import Achievement
from database.repositories.base import BaseRepository


class AchievementRepository(BaseRepository[Achievement]):
    model = Achievement

    def list_for_user(self, user_id: int) -> List[Achievement]:
        return self.list_by('user_id', user_id)

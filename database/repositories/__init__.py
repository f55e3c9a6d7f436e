from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.skill import SkillRepository
from database.repositories.endorsement import EndorsementRepository
from database.repositories.achievement import AchievementRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'SkillRepository',
    'EndorsementRepository',
    'AchievementRepository',
]

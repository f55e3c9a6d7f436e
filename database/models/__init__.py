from .base import Base
from .user import User
from .skill import Skill, Proficiency
from .endorsement import Endorsement
from .achievement import Achievement

__all__ = [
    'Base',
    'User',
    'Skill',
    'Proficiency',
    'Endorsement',
    'Achievement',
]

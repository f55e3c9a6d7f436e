"""API route handlers."""

from .users import router as users_router
from .skills import router as skills_router
from .endorsements import router as endorsements_router
from .achievements import router as achievements_router
from .leaderboard import router as leaderboard_router

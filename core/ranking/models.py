from dataclasses import dataclass

from database.models import User


@dataclass(frozen=True)
class EndorserStanding:
    """A user with the number of endorsements they have given."""
    user: User
    endorsement_count: int


@dataclass(frozen=True)
class UserStats:
    total_skills: int
    total_endorsements_received: int
    points: int
    level: int
    rank: int

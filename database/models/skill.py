import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Index, CheckConstraint

from .base import Base


class Proficiency(str, enum.Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"

    @classmethod
    def values(cls):
        return [p.value for p in cls]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Skill(Base):
    """
    A named capability claimed by a user.

    ``endorsement_count`` always equals the number of live Endorsement rows
    referencing this skill; the ScoringEngine keeps the two in step.
    """
    __tablename__ = 'skills'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    proficiency = Column(Text, nullable=False)
    endorsement_count = Column(Integer, nullable=False, default=0)
    source = Column(Text, nullable=False, default="manual")
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        CheckConstraint('endorsement_count >= 0', name='ck_skills_endorsement_count_non_negative'),
        Index('idx_skills_user_id', 'user_id'),
        {'sqlite_autoincrement': True},
    )

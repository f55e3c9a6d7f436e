from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Index, CheckConstraint

from .base import Base
from .skill import _utcnow


class Achievement(Base):
    """Gamification event; its ``points`` are credited to the owner once, on creation."""
    __tablename__ = 'achievements'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    type = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    points = Column(Integer, nullable=False, default=0)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        CheckConstraint('points >= 0', name='ck_achievements_points_non_negative'),
        Index('idx_achievements_user_id', 'user_id'),
        {'sqlite_autoincrement': True},
    )

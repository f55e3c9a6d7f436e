from sqlalchemy import Column, Integer, Text, Index

from core.levels import level_for_points
from .base import Base


class User(Base):
    """
    Employee profile with a running point total.

    ``points`` is mutated only through the ScoringEngine. ``level`` is not
    stored: it is derived from ``points`` on every read.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    email = Column(Text, nullable=False, unique=True)
    name = Column(Text, nullable=False)
    role = Column(Text, nullable=False)
    points = Column(Integer, nullable=False, default=0)
    avatar = Column(Text)

    __table_args__ = (
        Index('idx_users_points', 'points'),
        {'sqlite_autoincrement': True},
    )

    @property
    def level(self) -> int:
        return level_for_points(self.points or 0)

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r} points={self.points}>"

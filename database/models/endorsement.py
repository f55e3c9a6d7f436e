from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Index

from .base import Base
from .skill import _utcnow


class Endorsement(Base):
    """Peer attestation that ``endorsee_id`` has the skill ``skill_id``."""
    __tablename__ = 'endorsements'

    id = Column(Integer, primary_key=True, autoincrement=True)
    skill_id = Column(Integer, ForeignKey('skills.id', ondelete='CASCADE'), nullable=False)
    endorser_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    endorsee_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    comment = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index('idx_endorsements_skill_id', 'skill_id'),
        Index('idx_endorsements_endorser_id', 'endorser_id'),
        Index('idx_endorsements_endorsee_id', 'endorsee_id'),
        {'sqlite_autoincrement': True},
    )

"""
SQLAlchemy engine, session factory and the store lock.
"""

import logging
import threading
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.config_loader import DatabaseConfig
from database.models import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Owns the engine, the session factory and the lock serializing access.

    All units of work against one manager run one at a time, so readers
    never observe a half-applied mutation.
    """

    def __init__(self, config: Optional[DatabaseConfig] = None):
        config = config or DatabaseConfig()
        self.url = config.url

        engine_kwargs = {"echo": config.echo}
        if self.url.startswith("sqlite"):
            # One shared connection so an in-memory database is visible to every thread
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine = create_engine(self.url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
        self.lock = threading.Lock()
        self.lock_timeout = config.lock_timeout

    def create_all(self) -> None:
        Base.metadata.create_all(self.engine)
        logger.info("Database schema ready")

    def dispose(self) -> None:
        self.engine.dispose()

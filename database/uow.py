import contextlib
import logging

from sqlalchemy.exc import SQLAlchemyError

from core.errors import InternalFailureError
from database.database import DatabaseManager
from database.repository import EntityStore

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def store_uow(db_manager: DatabaseManager):
    """Per-unit-of-work transaction scope.

    Holds the manager's store lock for the whole scope and yields an
    EntityStore bound to a fresh Session. Commits on success, rolls back
    on exception, always closes. Fails with InternalFailureError when the
    lock is not free within ``db_manager.lock_timeout`` seconds.

    Usage:
        with store_uow(manager) as store:
            engine = ScoringEngine(store)
            engine.add_skill(...)
        # commit happens automatically on successful exit
    """
    if not db_manager.lock.acquire(timeout=db_manager.lock_timeout):
        logger.error(f"Store lock not acquired within {db_manager.lock_timeout}s")
        raise InternalFailureError("Store is busy")

    try:
        session = db_manager.SessionLocal()
        try:
            yield EntityStore(session)
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Store failure, unit of work rolled back: {e}", exc_info=True)
            raise InternalFailureError("Store operation failed") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
    finally:
        db_manager.lock.release()

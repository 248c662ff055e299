"""
Single commit point for multi-step writes.
"""
import logging
from contextlib import contextmanager

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from ..exceptions import ConflictError

logger = logging.getLogger(__name__)


@contextmanager
def write_transaction(db: Session):
    """Commit everything done in the block, or roll all of it back"""
    try:
        yield db
        db.commit()
    except StaleDataError as e:
        db.rollback()
        logger.warning(f"Concurrent package write detected: {e}")
        raise ConflictError(
            "Package was modified by another request, please retry")
    except Exception:
        db.rollback()
        raise

"""Shared helpers for talking to the database"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import UpstreamError

logger = logging.getLogger(__name__)


@contextmanager
def upstream_guard(db: Session, action: str):
    """
    Translate database failures into UpstreamError.

    The session is rolled back so it stays usable; the failure is terminal for
    the current attempt and is not retried.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Database failure while trying to {action}: {e}")
        raise UpstreamError() from e

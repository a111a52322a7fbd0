"""Store reachability check used by the liveness endpoints."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def check_database(db: Session) -> bool:
    """Run a trivial round-trip query. Returns True when the store answered."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return False
    logger.debug("Health check passed")
    return True

"""Startup schema creation for the shared votes table."""

import logging

from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from voting.core.errors import StartupError
from voting.models import Base

logger = logging.getLogger(__name__)


def run_migrations(engine: Engine) -> None:
    """Create the votes table if it does not exist yet.

    Idempotent. Raises StartupError when the store rejects the DDL or is
    unreachable, so the caller can refuse to serve traffic.
    """
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as e:
        logger.exception("Error during database migration")
        raise StartupError("Could not create votes table") from e
    logger.info("Database migration completed: votes table ready")

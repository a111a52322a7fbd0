"""Vote service for validating and recording cast votes."""

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from voting.core.errors import StorageError, ValidationError
from voting.models.vote import Vote

logger = logging.getLogger(__name__)


def validate_option(option: str | None, options: Sequence[str]) -> str:
    """Return the option if it exactly matches one of the configured options.

    Matching is case-sensitive. Raises ValidationError otherwise.
    """
    if not option or option not in options:
        raise ValidationError(option)
    return option


def cast_vote(db: Session, option: str | None, options: Sequence[str]) -> Vote:
    """
    Validate and persist a single vote.
    Every call inserts exactly one row; there is no per-voter deduplication.
    """
    option = validate_option(option, options)

    vote = Vote(option=option)
    try:
        db.add(vote)
        db.commit()
        db.refresh(vote)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error saving vote")
        raise StorageError("Error saving vote") from e

    logger.info("Vote registered: option=%s", option)
    return vote

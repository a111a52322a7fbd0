"""Results service: on-demand tallies and bulk deletion of votes."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from voting.core.errors import StorageError
from voting.models.vote import Vote

logger = logging.getLogger(__name__)


def format_percentage(value: float, places: int) -> str:
    """Format with ties rounded away from zero, e.g. 12.625 -> "12.63".

    Decimal(float) is exact, so a value sitting on the half rounds up rather
    than to even as the built-in format spec would.
    """
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class OptionTally:
    option: str
    count: int
    percentage: float
    bar_width: float


@dataclass(frozen=True)
class Tally:
    total: int
    options: list[OptionTally] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def compute_tally(counts: Iterable[tuple[str, int]]) -> Tally:
    """Build a Tally from (option, count) pairs.

    Options are ordered by count descending, ties broken by option ascending.
    The total is the sum of the counts, so percentages always agree with it.
    Bar widths are relative to the leading option (denominator floored at 1).
    """
    rows = sorted(((option, int(count)) for option, count in counts), key=lambda r: (-r[1], r[0]))
    total = sum(count for _, count in rows)
    max_count = max((count for _, count in rows), default=0)
    bar_base = max(max_count, 1)

    options = [
        OptionTally(
            option=option,
            count=count,
            percentage=(count / total * 100) if total > 0 else 0.0,
            bar_width=(count / bar_base * 100) if total > 0 else 0.0,
        )
        for option, count in rows
    ]
    return Tally(total=total, options=options)


def get_tally(db: Session) -> Tally:
    """Read per-option counts from the store with a single grouped query."""
    count_col = func.count(Vote.id).label("count")
    stmt = (
        select(Vote.option, count_col)
        .group_by(Vote.option)
        .order_by(count_col.desc(), Vote.option.asc())
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error retrieving results")
        raise StorageError("Error retrieving results") from e

    tally = compute_tally(rows)
    logger.info(
        "Results retrieved: total=%d votes=%s",
        tally.total,
        {t.option: t.count for t in tally.options},
    )
    return tally


def delete_all_votes(db: Session) -> int:
    """Remove every vote. Irreversible. Returns the number of deleted rows."""
    try:
        result = db.execute(delete(Vote))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error deleting votes")
        raise StorageError("Error deleting votes") from e

    deleted = result.rowcount
    logger.info("All votes deleted: row_count=%d", deleted)
    return deleted

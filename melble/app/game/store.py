"""Round persistence keyed by day key.

Each day key has at most one row holding the JSON of its
:class:`~melble.app.game.models.round.StoredRound`.  Writes replace the whole
row, so the last write wins.
"""

import datetime
import logging
from datetime import UTC

from sqlmodel import Field, Session, SQLModel

from .models.round import StoredRound

logger = logging.getLogger(__name__)


class RoundRecord(SQLModel, table=True):
    """One stored round per calendar day."""

    __tablename__ = 'melble_round'  # type: ignore[misc]

    day_key: str = Field(primary_key=True, max_length=10)
    payload: str
    updated_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(UTC)
    )


def load_round(session: Session, day_key: str) -> StoredRound | None:
    """Return the stored round for *day_key*, or None."""
    record = session.get(RoundRecord, day_key)
    if record is None:
        return None
    return StoredRound.model_validate_json(record.payload)


def save_round(session: Session, stored: StoredRound) -> RoundRecord:
    """Insert or replace the stored round for its day key."""
    payload = stored.model_dump_json(by_alias=True)
    record = session.get(RoundRecord, stored.day_key)
    if record is None:
        record = RoundRecord(day_key=stored.day_key, payload=payload)
    else:
        record.payload = payload
        record.updated_at = datetime.datetime.now(UTC)
    session.add(record)
    session.commit()
    session.refresh(record)
    logger.debug(
        '[%s] Saved round with %d guesses', stored.day_key, len(stored.guesses)
    )
    return record


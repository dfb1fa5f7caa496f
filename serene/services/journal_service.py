# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from serene.models.journal import Emotion, JournalEntry
from serene.services.sentiment_service import analyze_journal_sentiment

logger = logging.getLogger(__name__)


def save_journal_entry(
    db: Session,
    content: str,
    emotion: Emotion,
    analysis: Optional[str],
    date: Optional[datetime] = None,
) -> JournalEntry:
    entry = JournalEntry(
        content=content,
        emotion=Emotion(emotion).value,
        analysis=analysis,
        date=date or datetime.utcnow(),
    )
    try:
        db.add(entry)
        db.commit()
        db.refresh(entry)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("❌ Error saving journal entry")
        raise
    logger.info("📝 Journal entry %s saved (%s)", entry.id, entry.emotion)
    return entry


def create_analyzed_entry(db: Session, content: str) -> JournalEntry:
    """
    Journal submit flow: classify the text, then persist it together with the
    emotion and analysis. Blank content is rejected before any AI call.
    """
    if not content or not content.strip():
        raise ValueError("Journal entry cannot be empty.")

    result = analyze_journal_sentiment(content)
    return save_journal_entry(db, content, result.emotion, result.analysis)


def get_journal_entries(db: Session) -> List[JournalEntry]:
    return db.query(JournalEntry).order_by(JournalEntry.date.desc()).all()


def get_journal_entry(db: Session, entry_id: str) -> Optional[JournalEntry]:
    return db.query(JournalEntry).filter(JournalEntry.id == entry_id).first()


def delete_journal_entry(db: Session, entry_id: str) -> bool:
    entry = get_journal_entry(db, entry_id)
    if not entry:
        return False
    try:
        db.delete(entry)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("❌ Error deleting journal entry %s", entry_id)
        raise
    return True

# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from collections import Counter
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from serene.models.journal import Emotion
from serene.models.mood import MoodEntry

logger = logging.getLogger(__name__)

MIN_INTENSITY = 1
MAX_INTENSITY = 10


def save_mood_entry(
    db: Session,
    day: date,
    emotion: Emotion,
    intensity: int,
    notes: Optional[str] = None,
) -> MoodEntry:
    """Upsert keyed by calendar day: one mood entry per date."""
    if not MIN_INTENSITY <= intensity <= MAX_INTENSITY:
        raise ValueError(f"Mood intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}.")

    entry = db.query(MoodEntry).filter(MoodEntry.date == day).first()
    if entry:
        entry.emotion = Emotion(emotion).value
        entry.intensity = intensity
        entry.notes = notes
        action = "updated"
    else:
        entry = MoodEntry(date=day, emotion=Emotion(emotion).value, intensity=intensity, notes=notes)
        db.add(entry)
        action = "inserted"

    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("❌ Error saving mood entry for %s", day)
        raise

    db.refresh(entry)
    logger.info("😊 Mood entry %s for %s", action, day.isoformat())
    return entry


def get_mood_entries(db: Session) -> List[MoodEntry]:
    return db.query(MoodEntry).order_by(MoodEntry.date.asc()).all()


def mood_summary(db: Session, start: date, end: date) -> dict:
    """
    Counts of each emotion over the inclusive date range, plus the average
    intensity (None when the range is empty).
    """
    entries = (
        db.query(MoodEntry)
        .filter(MoodEntry.date >= start)
        .filter(MoodEntry.date <= end)
        .all()
    )

    emotion_counter = Counter(e.emotion for e in entries)
    average = round(sum(e.intensity for e in entries) / len(entries), 2) if entries else None

    return {
        "start_date": start,
        "end_date": end,
        "total_records": len(entries),
        "average_intensity": average,
        "summary": dict(emotion_counter),
    }

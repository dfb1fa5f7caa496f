# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from serene.models.habit import Habit, HabitCategory, HabitCompletion

logger = logging.getLogger(__name__)

DEFAULT_HABITS = [
    {
        "name": "Drink Water",
        "description": "Drink at least 8 glasses of water throughout the day",
        "category": HabitCategory.self_care,
    },
    {
        "name": "5-Minute Meditation",
        "description": "Take 5 minutes to meditate and center yourself",
        "category": HabitCategory.mindfulness,
    },
    {
        "name": "Stretching",
        "description": "Do some gentle stretching to release tension",
        "category": HabitCategory.physical,
    },
]


class HabitNotFound(LookupError):
    pass


def _commit(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("❌ Error %s", action)
        raise


def current_streak(dates: Iterable[date], today: Optional[date] = None) -> int:
    """
    Consecutive completed days ending today. A streak that ended yesterday
    still counts while today is not yet done.
    """
    today = today or date.today()
    done = set(dates)
    if today in done:
        day = today
    elif today - timedelta(days=1) in done:
        day = today - timedelta(days=1)
    else:
        return 0

    count = 0
    while day in done:
        count += 1
        day -= timedelta(days=1)
    return count


def create_habit(db: Session, name: str, description: str = "", category=HabitCategory.self_care) -> Habit:
    if not name or not name.strip():
        raise ValueError("Habit name cannot be empty.")
    habit = Habit(
        name=name.strip(),
        description=description or "",
        category=HabitCategory(category).value,
        created_at=datetime.utcnow(),
    )
    db.add(habit)
    _commit(db, "creating habit")
    db.refresh(habit)
    logger.info("✅ Habit created: %s", habit.name)
    return habit


def list_habits(db: Session) -> List[Habit]:
    return (
        db.query(Habit)
        .options(selectinload(Habit.completions))
        .order_by(Habit.created_at.asc())
        .all()
    )


def get_habit(db: Session, habit_id: str) -> Optional[Habit]:
    return db.query(Habit).filter(Habit.id == habit_id).first()


def update_habit(
    db: Session,
    habit_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    category=None,
) -> Optional[Habit]:
    if name is not None and not name.strip():
        raise ValueError("Habit name cannot be empty.")

    habit = get_habit(db, habit_id)
    if not habit:
        return None

    if name is not None:
        habit.name = name.strip()
    if description is not None:
        habit.description = description
    if category is not None:
        habit.category = HabitCategory(category).value

    _commit(db, "updating habit")
    db.refresh(habit)
    return habit


def delete_habit(db: Session, habit_id: str) -> bool:
    habit = get_habit(db, habit_id)
    if not habit:
        return False
    db.delete(habit)  # completions go with it
    _commit(db, "deleting habit")
    logger.info("🗑️ Habit %s deleted", habit_id)
    return True


def toggle_habit_completion(db: Session, habit_id: str, day: date) -> bool:
    """
    Flip the completion for (habit, day). Returns True when the day is now
    completed, False when the completion was removed.
    """
    if not get_habit(db, habit_id):
        raise HabitNotFound(habit_id)

    existing = (
        db.query(HabitCompletion)
        .filter(HabitCompletion.habit_id == habit_id, HabitCompletion.date == day)
        .first()
    )
    if existing:
        db.delete(existing)
        completed = False
    else:
        db.add(HabitCompletion(habit_id=habit_id, date=day))
        completed = True

    _commit(db, "toggling habit completion")
    return completed


def initialize_default_habits(db: Session) -> int:
    if db.query(Habit).count() > 0:
        return 0

    now = datetime.utcnow()
    for item in DEFAULT_HABITS:
        db.add(Habit(
            name=item["name"],
            description=item["description"],
            category=item["category"].value,
            created_at=now,
        ))
    _commit(db, "inserting default habits")
    logger.info("🌱 Seeded %d default habits", len(DEFAULT_HABITS))
    return len(DEFAULT_HABITS)

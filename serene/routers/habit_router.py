# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional

from serene.models.database import get_db
from serene.models.habit import Habit
from serene.schemas.habit_schemas import (
    HabitCreateRequest,
    HabitOut,
    HabitToggleRequest,
    HabitToggleResponse,
    HabitUpdateRequest,
    SeedResponse,
)
from serene.services import habit_service

router = APIRouter(prefix="/habits", tags=["Habits"])


def _habit_out(habit: Habit, today: date) -> HabitOut:
    dates = habit.completed_dates
    return HabitOut(
        id=habit.id,
        name=habit.name,
        description=habit.description or "",
        category=habit.category,
        created_at=habit.created_at,
        completed_dates=dates,
        streak=habit_service.current_streak(dates, today),
    )


@router.get("", response_model=List[HabitOut])
def list_habits(db: Session = Depends(get_db)):
    today = date.today()
    try:
        return [_habit_out(h, today) for h in habit_service.list_habits(db)]
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch habits")


@router.post("", response_model=HabitOut, status_code=201)
def create_habit(payload: HabitCreateRequest, db: Session = Depends(get_db)):
    try:
        habit = habit_service.create_habit(db, payload.name, payload.description, payload.category)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to create habit")
    return _habit_out(habit, date.today())


@router.post("/defaults", response_model=SeedResponse)
def seed_default_habits(db: Session = Depends(get_db)):
    try:
        return {"inserted": habit_service.initialize_default_habits(db)}
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to insert default habits")


@router.patch("/{habit_id}", response_model=HabitOut)
def update_habit(habit_id: str, payload: HabitUpdateRequest, db: Session = Depends(get_db)):
    try:
        habit = habit_service.update_habit(
            db,
            habit_id,
            name=payload.name,
            description=payload.description,
            category=payload.category,
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to update habit")
    if not habit:
        raise HTTPException(status_code=404, detail="Habit not found")
    return _habit_out(habit, date.today())


@router.delete("/{habit_id}", status_code=204)
def delete_habit(habit_id: str, db: Session = Depends(get_db)):
    try:
        deleted = habit_service.delete_habit(db, habit_id)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to delete habit")
    if not deleted:
        raise HTTPException(status_code=404, detail="Habit not found")


@router.post("/{habit_id}/toggle", response_model=HabitToggleResponse)
def toggle_completion(
    habit_id: str,
    payload: Optional[HabitToggleRequest] = None,
    db: Session = Depends(get_db),
):
    day = (payload.date if payload else None) or date.today()
    try:
        completed = habit_service.toggle_habit_completion(db, habit_id, day)
    except habit_service.HabitNotFound:
        raise HTTPException(status_code=404, detail="Habit not found")
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to toggle habit completion")
    return {"habit_id": habit_id, "date": day, "completed": completed}

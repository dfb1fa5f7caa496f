# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import datetime
from typing import List

from serene.models.database import get_db
from serene.schemas.mood_schemas import MoodEntryOut, MoodEntryRequest, MoodSummaryOut
from serene.services import mood_service

router = APIRouter(prefix="/moods", tags=["Moods"])


@router.get("", response_model=List[MoodEntryOut])
def list_moods(db: Session = Depends(get_db)):
    try:
        return mood_service.get_mood_entries(db)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch mood entries")


@router.put("", response_model=MoodEntryOut)
def save_mood(payload: MoodEntryRequest, db: Session = Depends(get_db)):
    try:
        return mood_service.save_mood_entry(
            db, payload.date, payload.emotion, payload.intensity, payload.notes
        )
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to save mood entry")


@router.get("/summary", response_model=MoodSummaryOut)
def summary(
    start_date: str = Query(..., description="Start date in YYYY-MM-DD format"),
    end_date: str = Query(..., description="End date in YYYY-MM-DD format"),
    db: Session = Depends(get_db),
):
    """
    Returns counts of each emotion label over the given date range.
    """

    # Validate dates
    try:
        start = datetime.strptime(start_date, "%Y-%m-%d").date()
        end = datetime.strptime(end_date, "%Y-%m-%d").date()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date format. Use YYYY-MM-DD.")

    if end < start:
        raise HTTPException(status_code=400, detail="End date cannot be before start date.")

    try:
        return mood_service.mood_summary(db, start, end)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to summarize mood entries")

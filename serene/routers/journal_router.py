# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from serene.models.database import get_db
from serene.schemas.journal_schemas import JournalContentRequest, JournalEntryOut, SentimentResult
from serene.services import journal_service
from serene.services.sentiment_service import analyze_journal_sentiment
from serene.utils.rate_limit_utils import get_ai_limit, limiter

router = APIRouter(prefix="/journal", tags=["Journal"])


@router.post("/analyze", response_model=SentimentResult)
@limiter.limit(get_ai_limit)
def analyze_entry(request: Request, payload: JournalContentRequest):
    """
    Classify text without saving it. Always answers: the neutral fallback is
    returned when the model is unavailable or replies with something unusable.
    """
    return analyze_journal_sentiment(payload.content)


@router.post("", response_model=JournalEntryOut, status_code=201)
@limiter.limit(get_ai_limit)
def create_entry(request: Request, payload: JournalContentRequest, db: Session = Depends(get_db)):
    try:
        return journal_service.create_analyzed_entry(db, payload.content)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to save journal entry")


@router.get("", response_model=List[JournalEntryOut])
def list_entries(db: Session = Depends(get_db)):
    try:
        return journal_service.get_journal_entries(db)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch journal entries")


@router.get("/{entry_id}", response_model=JournalEntryOut)
def get_entry(entry_id: str, db: Session = Depends(get_db)):
    try:
        entry = journal_service.get_journal_entry(db, entry_id)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to fetch journal entry")
    if not entry:
        raise HTTPException(status_code=404, detail="Journal entry not found")
    return entry


@router.delete("/{entry_id}", status_code=204)
def delete_entry(entry_id: str, db: Session = Depends(get_db)):
    try:
        deleted = journal_service.delete_journal_entry(db, entry_id)
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to delete journal entry")
    if not deleted:
        raise HTTPException(status_code=404, detail="Journal entry not found")

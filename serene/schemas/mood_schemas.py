# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict
from datetime import date

from serene.models.journal import Emotion


class MoodEntryRequest(BaseModel):
    date: date
    emotion: Emotion
    intensity: int = Field(..., ge=1, le=10)
    notes: Optional[str] = None


class MoodEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: date
    emotion: Emotion
    intensity: int
    notes: Optional[str] = None


class MoodSummaryOut(BaseModel):
    start_date: date
    end_date: date
    total_records: int
    average_intensity: Optional[float] = None
    summary: Dict[str, int]

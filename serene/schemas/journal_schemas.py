# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional
from datetime import datetime

from serene.models.journal import Emotion


class SentimentResult(BaseModel):
    emotion: Emotion
    analysis: str


class JournalContentRequest(BaseModel):
    content: str

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Journal entry cannot be empty.")
        return value


class JournalEntryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: datetime
    content: str
    emotion: Emotion
    analysis: Optional[str] = None

# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, String, Text, DateTime
from datetime import datetime
from serene.models.database import Base
import enum
import uuid


class Emotion(str, enum.Enum):
    happy = "happy"
    calm = "calm"
    sad = "sad"
    anxious = "anxious"
    angry = "angry"
    neutral = "neutral"


EMOTION_LABELS = [e.value for e in Emotion]


def new_uuid() -> str:
    return str(uuid.uuid4())


class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(String(36), primary_key=True, default=new_uuid)
    content = Column(Text, nullable=False)
    emotion = Column(String, nullable=False, default=Emotion.neutral.value)
    analysis = Column(Text, nullable=True)
    date = Column(DateTime, default=datetime.utcnow, index=True)

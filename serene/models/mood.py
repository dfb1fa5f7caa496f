# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Text, Date, DateTime, CheckConstraint
from datetime import datetime
from serene.models.database import Base
from serene.models.journal import Emotion, new_uuid


class MoodEntry(Base):
    __tablename__ = "mood_entries"
    __table_args__ = (CheckConstraint("intensity BETWEEN 1 AND 10", name="ck_mood_intensity_range"),)

    id = Column(String(36), primary_key=True, default=new_uuid)
    date = Column(Date, nullable=False, unique=True, index=True)  # one entry per day
    emotion = Column(String, nullable=False, default=Emotion.neutral.value)
    intensity = Column(Integer, nullable=False, default=5)
    notes = Column(Text, nullable=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime
from serene.models.database import Base
from serene.models.journal import new_uuid
import enum


class HabitCategory(str, enum.Enum):
    self_care = "self-care"
    mindfulness = "mindfulness"
    physical = "physical"
    social = "social"
    productivity = "productivity"


class Habit(Base):
    __tablename__ = "habits"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String, nullable=False)
    description = Column(Text, default="")
    category = Column(String, nullable=False, default=HabitCategory.self_care.value)
    created_at = Column(DateTime, default=datetime.utcnow)

    completions = relationship(
        "HabitCompletion",
        back_populates="habit",
        cascade="all, delete-orphan",
        order_by="HabitCompletion.date",
    )

    @property
    def completed_dates(self):
        return [c.date for c in self.completions]


class HabitCompletion(Base):
    __tablename__ = "habit_completions"
    __table_args__ = (UniqueConstraint("habit_id", "date", name="uq_habit_completion_day"),)

    id = Column(Integer, primary_key=True, index=True)
    habit_id = Column(String(36), ForeignKey("habits.id", ondelete="CASCADE"), nullable=False)
    date = Column(Date, nullable=False)

    habit = relationship("Habit", back_populates="completions")

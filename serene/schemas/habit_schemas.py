# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
import datetime as dt

from serene.models.habit import HabitCategory


class HabitCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str = ""
    category: HabitCategory = HabitCategory.self_care

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Habit name cannot be empty.")
        return value


class HabitUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=120)
    description: Optional[str] = None
    category: Optional[HabitCategory] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            raise ValueError("Habit name cannot be empty.")
        return value


class HabitToggleRequest(BaseModel):
    date: Optional[dt.date] = None  # defaults to today


class HabitOut(BaseModel):
    id: str
    name: str
    description: str
    category: HabitCategory
    created_at: dt.datetime
    completed_dates: List[dt.date]
    streak: int


class HabitToggleResponse(BaseModel):
    habit_id: str
    date: dt.date
    completed: bool


class SeedResponse(BaseModel):
    inserted: int

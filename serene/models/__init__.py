# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from .journal import JournalEntry
from .habit import Habit, HabitCompletion
from .mood import MoodEntry

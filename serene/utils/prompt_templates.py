# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from serene.models.journal import EMOTION_LABELS


# -------------------------
# Journal
# -------------------------

def sentiment_analysis_prompt(content: str) -> str:
    labels = ", ".join(EMOTION_LABELS)
    return f"""
Analyze the following journal entry and determine the primary emotion expressed.
Choose exactly one emotion from this list: {labels}.
Also provide a brief analysis (2-3 sentences) of the emotional state reflected in the entry.

Journal entry: "{content}"

Return your response in JSON format with two fields:
- emotion: the primary emotion (one of: {labels})
- analysis: brief analysis of the emotional state

IMPORTANT: Return ONLY the JSON object without any markdown formatting, code blocks, or additional text.
"""

# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import json
import logging
import re

from serene.models.journal import Emotion, EMOTION_LABELS
from serene.schemas.journal_schemas import SentimentResult
from serene.services.llm_service import get_llm_reply
from serene.utils.prompt_templates import sentiment_analysis_prompt

logger = logging.getLogger(__name__)

FALLBACK_ANALYSIS = "Unable to analyze sentiment. Please try again later."

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


class SentimentParseError(ValueError):
    """The model reply did not contain a usable emotion/analysis object."""


def fallback_result() -> SentimentResult:
    return SentimentResult(emotion=Emotion.neutral, analysis=FALLBACK_ANALYSIS)


def extract_json_block(text: str) -> str:
    """Return the body of the first markdown code fence, or the trimmed text."""
    stripped = (text or "").strip()
    match = _FENCE_RE.search(stripped)
    if match and match.group(1):
        return match.group(1).strip()
    return stripped


def parse_sentiment_reply(text: str) -> SentimentResult:
    raw = extract_json_block(text)
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise SentimentParseError(f"Reply is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise SentimentParseError("Reply JSON is not an object.")

    emotion = data.get("emotion")
    if not isinstance(emotion, str) or emotion.strip().lower() not in EMOTION_LABELS:
        raise SentimentParseError(f"Unsupported emotion label: {emotion!r}")

    analysis = data.get("analysis")
    if not isinstance(analysis, str) or not analysis.strip():
        raise SentimentParseError("Missing analysis text.")

    return SentimentResult(emotion=Emotion(emotion.strip().lower()), analysis=analysis.strip())


def analyze_journal_sentiment(content: str) -> SentimentResult:
    """
    Classify a journal entry into one of the six emotions and attach a short
    analysis. Never raises: any failure yields the neutral fallback.
    """
    try:
        reply = get_llm_reply(sentiment_analysis_prompt(content))
        result = parse_sentiment_reply(reply)
        logger.info("🧠 Journal sentiment classified as %s", result.emotion.value)
        return result
    except Exception:
        logger.exception("❌ Error analyzing sentiment, using neutral fallback.")
        return fallback_result()

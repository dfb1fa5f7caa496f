# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import logging
import requests

from serene.utils import config

# ---------------------------
# ✅ Logger Setup
# ---------------------------

logger = logging.getLogger(__name__)


class LLMServiceError(RuntimeError):
    """Raised when the language model could not produce a reply."""


def _headers() -> dict:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {config.XAI_API_KEY}",
    }


# ---------------------------
# ✅ Chat Completion Call
# ---------------------------

def get_llm_reply(prompt: str) -> str:
    """
    Send a single-turn prompt to the configured chat-completions endpoint
    (xAI Grok by default) and return the text of the first choice.

    One request, no retries. Every failure surfaces as LLMServiceError so the
    caller decides on the fallback.
    """
    if not config.XAI_API_KEY:
        raise LLMServiceError("XAI_API_KEY is not configured.")

    url = f"{config.LLM_API_BASE}/chat/completions"
    payload = {
        "model": config.LLM_MODEL,
        "messages": [{"role": "user", "content": prompt}],
        "stream": False,
    }

    try:
        logger.info("🔁 Sending prompt to %s (model=%s)", url, config.LLM_MODEL)
        response = requests.post(url, headers=_headers(), json=payload, timeout=config.LLM_TIMEOUT)
        response.raise_for_status()
        result = response.json()
    except requests.exceptions.RequestException as e:
        raise LLMServiceError(f"LLM request failed: {e}") from e
    except ValueError as e:
        raise LLMServiceError("LLM returned a non-JSON body.") from e

    try:
        content = result["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        logger.warning("⚠️ Unexpected completion format: %s", result)
        raise LLMServiceError("Unexpected LLM response format.") from e

    if not isinstance(content, str) or not content.strip():
        raise LLMServiceError("Empty LLM response.")
    return content

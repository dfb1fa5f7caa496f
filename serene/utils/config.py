# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

import os

# ✅ Only load .env in local/dev
if os.environ.get("ENV") != "production":
    from dotenv import load_dotenv
    load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database (Supabase Postgres in production, SQLite works locally)
DATABASE_URL = os.environ["DATABASE_URL"]

# xAI Grok speaks the OpenAI chat-completions dialect
XAI_API_KEY = os.getenv("XAI_API_KEY")
LLM_API_BASE = os.getenv("LLM_API_BASE", "https://api.x.ai/v1").rstrip("/")
LLM_MODEL = os.getenv("LLM_MODEL", "grok-2")
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "30"))

AI_RATE_LIMIT = os.getenv("AI_RATE_LIMIT", "10/minute")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
SEED_DEFAULT_HABITS = _env_flag("SEED_DEFAULT_HABITS", True)

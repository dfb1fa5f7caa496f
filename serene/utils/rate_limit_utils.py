# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.

from slowapi import Limiter
from slowapi.util import get_remote_address

from serene.utils import config

limiter = Limiter(key_func=get_remote_address)


def get_ai_limit() -> str:
    # Only the endpoints that call the language model are throttled
    return config.AI_RATE_LIMIT

# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.



from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from serene.models.database import get_db
from serene.utils import config

router = APIRouter(tags=["Infra"])
logger = logging.getLogger(__name__)


@router.get("/healthz")
def health_check(db: Session = Depends(get_db)):
    result = {
        "db_connection": False,
        "llm_configured": bool(config.XAI_API_KEY),
    }

    try:
        # ✅ Check DB read
        db.execute(text("SELECT 1"))
        result["db_connection"] = True
    except SQLAlchemyError as e:
        logger.error("❌ Health check could not reach the database: %s", e)
        return {
            "status": "error",
            "error": str(e),
            "details": result
        }

    return {
        "status": "ok" if all(result.values()) else "partial",
        "details": result
    }

# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the Serene - Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


from fastapi import FastAPI
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from serene.models import database
from serene.models import *  # registers all models
from serene.routers import journal_router, habit_router, mood_router, healthz_router
from serene.services.habit_service import initialize_default_habits
from serene.utils import config

from serene.utils.rate_limit_utils import limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create DB tables in one go
    database.Base.metadata.create_all(bind=database.engine)

    if config.SEED_DEFAULT_HABITS:
        db = database.SessionLocal()
        try:
            initialize_default_habits(db)
        finally:
            db.close()

    logger.info("✅ Serene API started")
    yield


# Create FastAPI app with lifespan
app = FastAPI(
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    title="Serene Wellness Tracker API",
    description="Journal, habit and mood tracking with AI sentiment analysis",
    version="1.0"
)

app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# Include routers
app.include_router(journal_router.router)
app.include_router(habit_router.router)
app.include_router(mood_router.router)
app.include_router(healthz_router.router)


# ---------------------- ADDING EXCEPTION HANDLER ----------------------
@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request, exc):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests. Please slow down."}
    )


@app.get("/")
def read_root():
    return {"message": "Welcome to Serene - wellness tracker backend"}


@app.get("/health", tags=["Infra"])
def health_check():
    return {"status": "ok"}

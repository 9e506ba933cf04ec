"""FastAPI HTTP server setup."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from config import settings
from cronlens import CronEvaluator

logger = logging.getLogger(__name__)

# Global evaluator instance
cron_evaluator = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    global cron_evaluator

    logger.info("Starting CronLens server...")
    cron_evaluator = CronEvaluator(settings.worker_threads)
    logger.info("CronLens server started successfully")

    yield

    logger.info("Shutting down CronLens server...")
    if cron_evaluator:
        cron_evaluator.shutdown()
        cron_evaluator = None
    logger.info("CronLens server shut down")


app = FastAPI(
    title="CronLens",
    description="Cron expression parser, next-run calculator and explainer",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

from .endpoints import router

app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "CronLens",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "evaluator": {"running": cron_evaluator is not None}
    }

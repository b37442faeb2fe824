"""
FastAPI Application Entry Point - Order Processing Service
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from order_processing import __version__
from order_processing.config import settings
from order_processing.database import init_db
from order_processing.logging_config import setup_logging
from order_processing.api import processing, health

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Order Processing Service",
    description="Applies discounts, checks stock and settles pending customer orders",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(processing.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)


@app.on_event("startup")
def startup_event():
    """Configure logging and initialize database on startup"""
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s...", settings.SERVICE_NAME)
    init_db()
    logger.info("Database initialized")
    logger.info("%s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down %s...", settings.SERVICE_NAME)

"""
FastAPI Application - Tech-Hub Activity Dashboard API
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils import logger, init_logging
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    init_logging(app_name="api")
    logger.info("Starting API server")
    yield
    logger.info("Shutting down API server")


app = FastAPI(
    title="Tech-Hub Activity Dashboard",
    description="Ranked activity at geographic technology hubs from clustered news",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Tech-Hub Activity Dashboard",
        "version": "1.0.0",
        "status": "running"
    }

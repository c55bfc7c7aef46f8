#!/usr/bin/env python3
"""
Interview Generator startup script
Main entry point for running the API locally
"""
import logging
import uvicorn
from app.main import app
from app.core.config import get_settings

logger = logging.getLogger("app.startup")

def start_server():
    """Start the FastAPI server"""
    settings = get_settings()
    logger.info("Starting %s (docs at http://localhost:8000/docs)", settings.PROJECT_NAME)
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level=settings.LOG_LEVEL.lower()
    )

if __name__ == "__main__":
    start_server()

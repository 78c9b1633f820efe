"""
FastAPI application exposing the session file store over HTTP.
"""

import logging

from fastapi import FastAPI

from docbrowser.api.routers import router as api_router
from docbrowser.config.settings import configure_logging

# Create FastAPI app
app = FastAPI(title="docbrowser API")
app.include_router(api_router)

# Configure logging
configure_logging()

# Get logger for this module
logger = logging.getLogger(__name__)

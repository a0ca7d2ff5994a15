"""
FastAPI application exposing the command engine.
"""

import logging

from fastapi import FastAPI

from bundlecmd.api.routers import router as api_router
from bundlecmd.config.settings import settings

# Create FastAPI app
app = FastAPI(title="bundlecmd API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

"""
Development server launcher.

Serves the API with uvicorn.  Host and port come from SERVER_HOST and
SERVER_PORT; the server reloads on code changes when DEBUG is set.

Usage:
    python scripts/run_dev.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings
from app.core.logging_config import setup_logging

logger = logging.getLogger("run_dev")

if __name__ == "__main__":
    setup_logging()
    logger.info("%s %s on http://%s:%d (docs at /docs, reload=%s)", settings.PROJECT_NAME, settings.VERSION,
                settings.SERVER_HOST, settings.SERVER_PORT, settings.DEBUG)

    uvicorn.run("app.main:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT, reload=settings.DEBUG,
                log_level=settings.LOG_LEVEL.lower())

# agent_parser/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from agent_parser import __version__
from agent_parser.aggregator import facet_counter
from agent_parser.api import router as api_router
from agent_parser.classifier import BROWSER_RULES, OS_RULES, DEVICE_RULES
from agent_parser.config import settings
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    # Startup
    logger.info("Starting Agent Parser API...")
    logger.info(
        f"Rules loaded: {len(BROWSER_RULES)} browser, {len(OS_RULES)} os, {len(DEVICE_RULES)} device"
    )

    yield

    # Shutdown
    summary = facet_counter.snapshot()
    logger.info(f"Shutting down after {summary.total} classifications")


app = FastAPI(
    title="Agent Parser API",
    description="Classifies User-Agent strings by browser, operating system and device type",
    version=__version__,
    lifespan=lifespan,
)

# Register routes
app.include_router(api_router)

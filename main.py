"""
Campaign Generator Service - Main Application

A FastAPI service that takes a prospect's email, website and self-reported
positioning clarity, asks Claude (with web search and extended thinking) for
a B2B cold email campaign analysis, and renders the result as a styled page.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import settings  # noqa: E402
from models import CampaignResponse  # noqa: E402
from routes import envelope, router  # noqa: E402

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="Campaign Generator Service")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or incomplete submissions get the standard envelope, not FastAPI's 422."""
    logger.warning(f"Rejected submission to {request.url.path}: {exc.errors()}")
    return envelope(
        CampaignResponse(success=False, error="Missing required fields"), status_code=400
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}: {str(exc)}")
    return envelope(
        CampaignResponse(
            success=False, error="Failed to generate analysis. Please try again."
        ),
        status_code=500,
    )


# Include all routes from routes.py
app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        timeout_keep_alive=60,
        workers=settings.API_WORKERS,
    )

"""
FastAPI Main Application

This script wires the wellness chat routes and runs the FastAPI server on port 8000.
"""

from fastapi import FastAPI
import uvicorn
import logging

from wellness_chat import api as chat_api

# Setup logging with timestamps
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="Wellness Chat API",
    description="AI wellness support assistant backed by Gemini",
    version="1.0.0"
)

app.include_router(chat_api.router)


@app.get("/")
async def root():
    """Root endpoint."""
    logger.info("GET / - Root endpoint called")
    return {"message": "Wellness Chat API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    logger.info("GET /health - Health check endpoint called")
    return {"status": "healthy"}


if __name__ == "__main__":
    # Run the server on port 8000
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )

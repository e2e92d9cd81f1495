# dashboard/app.py

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tailor import __version__
from tailor.logging_setup import setup_logging
from dashboard.config import settings
from dashboard.api import scoring

setup_logging(settings.log_level, settings.log_format)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=__version__,
    debug=settings.debug,
    docs_url="/api/docs" if settings.debug else None,
    redoc_url="/api/redoc" if settings.debug else None,
)

# Include API routers
app.include_router(scoring.router, prefix="/api/score", tags=["score"])

# ============= Health Check =============

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": __version__
    }

# ============= Error Handlers =============

@app.exception_handler(404)
async def not_found_handler(request: Request, exc: HTTPException):
    """Handle 404 errors"""
    return JSONResponse(
        status_code=404,
        content={"detail": "Not found"}
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "dashboard.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

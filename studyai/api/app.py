"""
FastAPI application for StudyAI
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from studyai import __version__
from studyai.api.routes import router as study_router
from studyai.db.supabase_client import credentials_configured
from studyai.utils.logger import get_logger
from studyai.config import settings

logger = get_logger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="StudyAI API",
    description="Study notes, flashcards and quizzes backed by Supabase",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Pre-built front-end
app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

# Include study routes
app.include_router(study_router)


@app.on_event("startup")
async def startup_event():
    """Report configuration on startup"""
    logger.info("Starting StudyAI API...")
    logger.info(f"Loaded SUPABASE_URL: {settings.SUPABASE_URL!r}")
    logger.info(f"Loaded SUPABASE_KEY length: {len(settings.SUPABASE_KEY)}")

    if not credentials_configured():
        logger.warning("⚠️  Supabase credentials not found in .env file")
        logger.warning("Please add SUPABASE_URL and SUPABASE_KEY to your .env file")
    else:
        logger.info("✅ Supabase credentials configured")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down StudyAI API...")


@app.get("/", tags=["Root"], include_in_schema=False)
async def root():
    """Serve the landing page"""
    return FileResponse(settings.STATIC_DIR / "index.html")


# Error handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": message}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Treat malformed request bodies as validation errors"""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(
        status_code=400,
        content={"error": message}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions"""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": str(exc)}
    )


def run():
    """Run the API with uvicorn"""
    import uvicorn

    logger.info(f"✅ Server running at http://localhost:{settings.API_PORT}")
    logger.info(f"📦 Supabase configured: {'Yes ✓' if credentials_configured() else 'No ✗'}")
    uvicorn.run(
        "studyai.api.app:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG_MODE,
        log_config=None
    )


if __name__ == "__main__":
    run()

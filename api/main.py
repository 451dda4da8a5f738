import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Depends, Security, status
from fastapi.security import APIKeyHeader
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from database import db
from repositories.trailer_repository import TrailerRepository
from routes.trailer_routes import router as trailer_router

# Configure logging based on settings
Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(settings.log_file),
        logging.StreamHandler()
    ]
)
logger = logging.getLogger(__name__)

# API Key Authentication
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: Optional[str] = Security(api_key_header)):
    """Verify API key for authentication.

    Args:
        api_key: The API key from the X-API-Key header

    Returns:
        True if authentication successful

    Raises:
        HTTPException: If API key is invalid or missing
    """
    if not settings.api_key:  # If no API key is set, allow all requests (dev mode)
        return True
    if not api_key or api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key"
        )
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle - startup and shutdown events."""
    # Startup
    logger.info("Starting Trailers Service...")
    if not db.verify_connectivity():
        logger.warning("Cannot connect to Neo4j database")
    else:
        logger.info("Successfully connected to Neo4j database")
        added = TrailerRepository().ensure_constraints()
        if added:
            logger.info(f"Created {added} trailer constraint(s)")

    yield

    # Shutdown
    logger.info("Shutting down Trailers Service...")
    db.close()


tags_metadata = [
    {
        "name": "health",
        "description": "Health check endpoints for monitoring API status",
    },
    {
        "name": "trailers",
        "description": "Create, list and look up fleet trailer records",
    },
]

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
    ## Overview
    Trailers Service manages the fleet's trailer asset records: unit numbers,
    VINs, dimensions, ownership and lease terms, registration and the yard
    each trailer is assigned to.

    ## Features
    - **Validated creation**: VIN format, lease-date rules and dimension bounds
    - **Table listing**: paginated, filterable by status and trailer type
    - **Profiles**: full detail for a trailer by id or unit number

    ## Authentication
    Use the `X-API-Key` header for authentication. Contact admin for API key.
    """,
    version=settings.app_version,
    lifespan=lifespan,
    openapi_tags=tags_metadata,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "X-API-Key"],
)

# Health check endpoint (no auth required)
@app.get("/health",
         tags=["health"],
         summary="Health Check",
         description="Check the health status of the API and database connectivity",
         response_description="Health status information")
async def health_check():
    """Check API and database health status.

    Returns:
        dict: Health status with API status, database status, and version
    """
    db_status = "healthy" if db.verify_connectivity() else "unhealthy"
    return {
        "status": "healthy",
        "database": db_status,
        "version": settings.app_version
    }

# Root endpoint
@app.get("/",
         summary="API Information",
         description="Get basic information about the Trailers Service",
         response_description="API metadata")
async def root():
    """Get basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "documentation": "/docs"
    }

app.include_router(
    trailer_router,
    dependencies=[Depends(verify_api_key)]
)

# Error handlers
@app.exception_handler(404)
async def not_found_handler(request, exc):
    """Handle 404 Not Found errors.

    Args:
        request: The incoming request
        exc: The exception that was raised
    """
    # If it's an HTTPException with a detail, preserve it
    if hasattr(exc, 'detail'):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.detail}
        )
    return JSONResponse(
        status_code=404,
        content={"error": "Resource not found", "path": str(request.url)}
    )

@app.exception_handler(500)
async def internal_error_handler(request, exc):
    """Handle 500 Internal Server errors.

    Args:
        request: The incoming request
        exc: The exception that was raised
    """
    logger.error(f"Internal server error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )

"""
VahaanXchange Backend - main application.

Serves vehicle data, social sharing metadata and crawler-facing share pages.
"""
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import config
from .database import create_store_client
from .models import HealthOut
from .routes import ssr_router, vehicles_router
from .utils import now_iso

# Configure logging
log_handlers = [logging.StreamHandler(sys.stdout)]
if config.LOG_FILE:
    log_handlers.append(logging.FileHandler(config.LOG_FILE))

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=log_handlers
)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    # Startup
    logger.info("Starting VahaanXchange Backend...")
    try:
        app.state.store = create_store_client()
        base = f"http://localhost:{config.PORT}"
        logger.info(f"VahaanXchange Backend running on port {config.PORT}")
        logger.info(f"Health check: {base}/health")
        logger.info(f"API endpoint: {base}/api")
        logger.info(f"SSR endpoint: {base}/ssr")
        yield
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise
    finally:
        # Shutdown
        app.state.store = None
        logger.info("Shutting down VahaanXchange Backend...")

# Create FastAPI application
app = FastAPI(
    title=config.API_TITLE,
    version=config.API_VERSION,
    description=config.API_DESCRIPTION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    """Log every request made to the /api routes."""
    if request.url.path.startswith("/api"):
        logger.info(f"API Request: {request.method} {request.url.path}")
    return await call_next(request)

app.add_middleware(GZipMiddleware, minimum_size=config.GZIP_MINIMUM_SIZE)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=config.CORS_ALLOW_CREDENTIALS,
    allow_methods=config.CORS_ALLOW_METHODS,
    allow_headers=config.CORS_ALLOW_HEADERS,
)

# Added last so it wraps CORS and also covers preflight responses
@app.middleware("http")
async def security_headers(request: Request, call_next):
    """Apply security headers to every response."""
    response = await call_next(request)
    for name, value in config.SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response

def error_headers(request: Request) -> dict:
    """Security and CORS headers for responses built outside the middleware stack."""
    headers = dict(config.SECURITY_HEADERS)
    origin = request.headers.get("origin")
    if origin and origin in config.CORS_ORIGINS:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
        if config.CORS_ALLOW_CREDENTIALS:
            headers["Access-Control-Allow-Credentials"] = "true"
    return headers

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": ...} payloads."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None)
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    message = str(exc) if config.is_development else "Something went wrong"
    # Runs outside the middleware stack
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": message},
        headers=error_headers(request)
    )

# Health check endpoint
@app.get("/health", response_model=HealthOut)
async def health_check():
    """Liveness probe. Does not touch the store."""
    return HealthOut(
        status="healthy",
        timestamp=now_iso(),
        service=config.SERVICE_NAME
    )

# Include routers
app.include_router(vehicles_router)
app.include_router(ssr_router)

# Catch-all, registered last
@app.get("/{full_path:path}", include_in_schema=False)
async def route_not_found(full_path: str):
    return JSONResponse(
        status_code=404,
        content={
            "error": "Route not found",
            "availableRoutes": config.AVAILABLE_ROUTES
        }
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "vahaan_api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.is_development,
        log_level=config.LOG_LEVEL.lower()
    )

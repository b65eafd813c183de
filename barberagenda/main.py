import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Import models to ensure they're registered with SQLAlchemy Base
from . import models  # noqa: F401
from .config import ADMIN_PASSWORD, ALLOWED_ORIGINS
from .database import Base, engine
from .domain.bookings import router as bookings_router
from .domain.business_config import router as config_router
from .domain.dashboard import router as dashboard_router
from .errors import BookingAppError
from .routes import auth_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

API_VERSION = "1.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
        logger.info("Database tables created successfully")
    except Exception as e:
        # Ignore "already exists" errors from race conditions between workers
        error_msg = str(e)
        if "already exists" in error_msg or "duplicate key" in error_msg:
            logger.info("Database tables already exist (created by another worker)")
        else:
            logger.error(f"Failed to create database tables: {e}")
            raise

    if not ADMIN_PASSWORD:
        logger.warning("⚠️ ADMIN_PASSWORD not configured. Set it in the environment to enable the admin panel.")

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="BarberAgenda API", version=API_VERSION, lifespan=lifespan)


@app.exception_handler(BookingAppError)
async def booking_app_exception_handler(request: Request, exc: BookingAppError):
    """Render domain errors as {"detail": message} with their HTTP status"""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} - {type(exc).__name__}: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} - {type(exc).__name__}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{request.method} {request.url.path} - Error: {str(e)}")
        raise
    elapsed_ms = (time.time() - start_time) * 1000
    logger.info(f"{request.method} {request.url.path} - {response.status_code} ({elapsed_ms:.0f}ms)")
    return response


# CORS Configuration
logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)

# Routes
app.include_router(auth_router)
app.include_router(bookings_router)
app.include_router(config_router)
app.include_router(dashboard_router)


@app.get("/")
def root():
    return {"message": "BarberAgenda booking API", "version": API_VERSION, "status": "online"}


@app.get("/health")
def health():
    return {"status": "healthy"}

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./barberagenda.db")

# Connection pool, ignored for SQLite
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "300"))
DB_LOG_SLOW_QUERIES = os.getenv("DB_LOG_SLOW_QUERIES", "true").lower() == "true"
DB_SLOW_QUERY_THRESHOLD = float(os.getenv("DB_SLOW_QUERY_THRESHOLD", "1.0"))

# Security - CRITICAL: No default secret key in production
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    import warnings

    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105 - Dev fallback only

# Admin panel credentials
# ADMIN_PASSWORD has no default: login is refused until it is set
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
ADMIN_TOKEN_TTL_MINUTES = int(os.getenv("ADMIN_TOKEN_TTL_MINUTES", "1440"))

# CORS
ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5500",
).split(",")

# Business defaults, used until the administrator saves a configuration
DEFAULT_OPERATING_START = "09:00"
DEFAULT_OPERATING_END = "18:30"
DEFAULT_SLOT_INTERVAL_MINUTES = 30
DEFAULT_OPEN_WEEKDAYS = [1, 2, 3, 4, 5, 6]  # Sunday=0
DEFAULT_SERVICES = [
    {"name": "Corte Tradicional", "price": 60.0},
    {"name": "Barba Completa", "price": 45.0},
    {"name": "Corte + Barba", "price": 95.0},
    {"name": "Degradê Premium", "price": 75.0},
    {"name": "Pigmentação de Barba", "price": 55.0},
    {"name": "Tratamento Capilar", "price": 50.0},
]

# Minimum slot interval accepted from the admin panel
MIN_SLOT_INTERVAL_MINUTES = 5

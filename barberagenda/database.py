import logging
import time

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from .config import (
    DATABASE_URL,
    DB_LOG_SLOW_QUERIES,
    DB_MAX_OVERFLOW,
    DB_POOL_RECYCLE,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
    DB_SLOW_QUERY_THRESHOLD,
)

logger = logging.getLogger(__name__)


def engine_options(url: str) -> dict:
    """create_engine keyword arguments for `url`"""
    if url.startswith("sqlite"):
        # Sessions are handed across FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_recycle": DB_POOL_RECYCLE,
        "pool_size": DB_POOL_SIZE,
        "max_overflow": DB_MAX_OVERFLOW,
        "pool_timeout": DB_POOL_TIMEOUT,
    }


def enable_slow_query_logging(target_engine: Engine, threshold: float = DB_SLOW_QUERY_THRESHOLD) -> None:
    """Warn about statements on `target_engine` that take longer than `threshold` seconds"""

    @event.listens_for(target_engine, "before_cursor_execute")
    def start_timer(conn, _cursor, _statement, _parameters, _context, _executemany):
        conn.info.setdefault("booking_query_started", []).append(time.perf_counter())

    @event.listens_for(target_engine, "after_cursor_execute")
    def stop_timer(conn, _cursor, statement, _parameters, _context, _executemany):
        elapsed = time.perf_counter() - conn.info["booking_query_started"].pop()
        if elapsed > threshold:
            logger.warning(f"🐌 Query took {elapsed:.2f}s: {statement[:200]}")


try:
    engine = create_engine(DATABASE_URL, echo=False, **engine_options(DATABASE_URL))
except Exception as e:
    logger.error(f"❌ Could not create the booking store engine: {e}")
    raise

logger.info(f"✅ Booking store engine ready ({engine.url.get_backend_name()})")

if DB_LOG_SLOW_QUERIES:
    enable_slow_query_logging(engine)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

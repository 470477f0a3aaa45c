"""
Conexión a base de datos

Este módulo centraliza el acceso a la base de datos:
- SQLAlchemy engine + session factory (ORM)
- FastAPI dependency get_db (una sesión por request)
- transactional(): límite transaccional de cada operación de servicio
- check_database(): verificación con retry para /health

Author: TM3
Updated: 2026-10-18
"""
import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)


# ============================================================================
# SQLAlchemy Configuration
# ============================================================================

def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for a database URL

    Server databases (PostgreSQL via psycopg2) get a sized connection pool
    with pre-ping; SQLite gets check_same_thread disabled so FastAPI's
    threadpool can share connections.
    """
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,  # Verificar conexión antes de usar
        pool_size=settings.DB_POOL_SIZE,  # Número de conexiones en el pool
        max_overflow=settings.DB_MAX_OVERFLOW,  # Conexiones extras si se necesitan
    )


# SQLAlchemy Engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

# Session Factory
# Objects stay loaded after commit so services can return them to the router
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Base para modelos
Base = declarative_base()


def get_db() -> Iterator[Session]:
    """
    FastAPI dependency para obtener sesión de SQLAlchemy

    Usage:
        @router.get("/items")
        def read_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transactional(db: Session) -> Iterator[Session]:
    """
    Run a block as one transaction: commit on success, rollback on error

    Every service operation wraps its reads and writes in exactly one of these.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def init_db(bind: Optional[Engine] = None) -> None:
    """Create all tables registered on Base (no-op for existing tables)"""
    # Import models so they register on Base.metadata
    from nile import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# ============================================================================
# Database check with retry logic
# ============================================================================

def check_database(max_retries: int = 3, retry_delay: float = 1.0, bind: Optional[Engine] = None) -> float:
    """
    Run SELECT 1 against the database with retry and exponential backoff

    Args:
        max_retries: Maximum number of attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)
        bind: Engine to check (default: the application engine)

    Returns:
        Latency of the successful query in milliseconds

    Raises:
        sqlalchemy.exc.OperationalError: If all retry attempts fail
    """
    target = bind or engine
    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database check attempt {attempt}/{max_retries}")
            start = time.time()
            with target.connect() as conn:
                conn.execute(text("SELECT 1"))
            return round((time.time() - start) * 1000, 2)

        except OperationalError as e:
            last_error = e
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            # Don't retry on last attempt
            if attempt < max_retries:
                # Exponential backoff
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)

    logger.error(f"All {max_retries} connection attempts failed")
    raise last_error

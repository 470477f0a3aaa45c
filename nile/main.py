"""
Nile - Backend API
Administración de clientes, negocios, categorías, productos y pagos
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from nile.api import businesses, categories, customers, payments, products
from nile.core.config import settings
from nile.core.database import check_database, init_db
from nile.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL, settings.LOG_JSON)
    if settings.AUTO_CREATE_TABLES:
        init_db()
        logger.info("Database tables ready")
    yield


# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    lifespan=lifespan,
)

# Configure CORS from ALLOWED_ORIGINS ("*" allows any origin without credentials)
ALLOWED_ORIGINS = settings.get_allowed_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials="*" not in ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["Location"],
)

# Include API routers
prefix = settings.api_prefix
app.include_router(customers.router, prefix=f"{prefix}/customer", tags=["Customers"])
app.include_router(businesses.router, prefix=f"{prefix}/business", tags=["Businesses"])
app.include_router(categories.router, prefix=f"{prefix}/category", tags=["Categories"])
app.include_router(products.router, prefix=f"{prefix}/product", tags=["Products"])
app.include_router(payments.router, prefix=f"{prefix}/payment", tags=["Payments"])


@app.get("/")
def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Nile API",
        "status": "online",
        "version": settings.API_VERSION,
    }


@app.get("/health")
def health():
    """Health check endpoint para monitoreo - tests database connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        # Single fast attempt, no backoff
        db_latency_ms = check_database(max_retries=1, retry_delay=0)
        db_status = "connected"
    except SQLAlchemyError as e:
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "nile-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
        },
        "total_latency_ms": total_latency_ms,
    }

# barmanager/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from barmanager.config.settings import settings
from barmanager.config.database import init_db
from barmanager.core.middleware import setup_middleware, setup_exception_handlers
from barmanager.api.v1.router import api_router

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{settings.app_name} iniciando - versión {settings.version}")
    logger.info(f"Entorno: {'Development' if settings.debug else 'Production'}")
    logger.info(f"JWT {settings.algorithm}, expiración {settings.access_token_expire_minutes} minutos")
    logger.info(f"Base de datos: {'SQLite' if settings.is_sqlite else settings.database_url_normalized.split('@')[-1]}")
    init_db()

    yield

    # Shutdown
    logger.info(f"{settings.app_name} detenido")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Sistema de gestión para bares y restaurantes: inventario, ventas, compras y finanzas",
    docs_url="/docs",
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router, prefix=settings.api_prefix)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": f"{settings.app_name} - Gestión de bares y restaurantes",
        "version": settings.version,
        "status": "running",
        "environment": "production" if not settings.debug else "development",
        "docs": "/docs",
        "api": settings.api_prefix
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name,
        "environment": "production" if not settings.debug else "development"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "barmanager.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

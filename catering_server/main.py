"""
FastAPI app entry point
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .db import engine, Base
from .exceptions import PackageEngineError

# Import models so every table is registered on Base.metadata
from . import models  # noqa: F401

# Import routes
from .routes import (
    dishes,
    package_items,
    packages,
    add_ons,
    user_packages,
    metadata,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    print("=" * 60)
    print(f"🚀 Starting {settings.APP_NAME} in {settings.ENVIRONMENT} mode...")
    print(f"📊 Database URL: {settings.DATABASE_URL[:50]}...")
    print("=" * 60)

    for warning in settings.validate_settings():
        print(f"⚠️ {warning}")

    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        print("✅ Database tables created/verified")
    else:
        print("ℹ️ Schema is managed by alembic (alembic upgrade head)")

    print("\n" + "=" * 60)
    print("✅ Application ready!")
    print("=" * 60)

    yield

    # Shutdown
    print("\n👋 Shutting down...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PackageEngineError)
async def package_engine_error_handler(request: Request, exc: PackageEngineError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code} {exc.category}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.category},
    )


@app.get("/")
async def root():
    return {
        "status": "ok",
        "message": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "message": f"{settings.APP_NAME} is running",
        "environment": settings.ENVIRONMENT,
        "version": settings.APP_VERSION,
    }


# Register routers. Item routes go before package routes so that
# /caterer/packages/items is not read as a package id.
app.include_router(dishes.router)
app.include_router(package_items.router)
app.include_router(packages.router)
app.include_router(add_ons.router)
app.include_router(user_packages.router)
app.include_router(metadata.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("catering_server.main:app", host=settings.HOST,
                port=settings.PORT, reload=settings.DEBUG)

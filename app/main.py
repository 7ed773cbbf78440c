from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.core.config import settings
from app.core.database import init_db
from app.core.handlers import register_exception_handlers
from app.core.logging import setup_logging
from app.api.v1.router import api_router
from app.services.student.seed import seed_data


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = setup_logging(settings.LOG_LEVEL)
    logger.info(f"Starting {settings.PROJECT_NAME} v{settings.APP_VERSION}")

    # Runs before the server accepts requests
    init_db()
    if settings.SEED_ON_STARTUP:
        seed_data()

    yield

    logger.info("Shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

register_exception_handlers(app)

# Include API router
app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root():
    """
    Health check endpoint
    """
    return {
        "message": "Welcome to Student Management API",
        "docs": "/docs",
        "version": settings.APP_VERSION
    }

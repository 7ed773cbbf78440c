"""Entry point for the Student Management API.

Host, port and database settings come from environment variables or a
`.env` file in the working directory (see `app/core/config.py`).

Usage:
    python run.py
"""
import uvicorn

from app.core.config import settings


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )

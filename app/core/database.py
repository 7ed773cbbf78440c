from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from .config import settings
from .exceptions import DatabaseUnavailableError
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================


def _engine_options() -> dict:
    """
    Connection options for the configured backend.

    SQLite (local runs, tests) cannot share a QueuePool across threads,
    so it gets its own settings; an in-memory database must keep one
    connection alive or every session would see an empty schema.
    """
    if settings.is_sqlite:
        options = {"connect_args": {"check_same_thread": False}}
        if settings.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options

    return {
        # Connection pool settings
        "poolclass": QueuePool,
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_timeout": settings.DB_POOL_TIMEOUT,
        "pool_recycle": settings.DB_POOL_RECYCLE,
        "connect_args": {
            "connect_timeout": 10,  # seconds
        },
    }


engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Test connection before using (detect disconnects)
    echo=settings.DB_ECHO_SQL,
    **_engine_options()
)


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # Don't expire objects after commit
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables():
    """
    Create all tables defined in models (and the id sequence where the
    database supports sequences). Existing tables are left untouched.
    """
    # Register models on Base.metadata
    from app.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def drop_database_tables():
    """
    Drop all database tables.

    This deletes all data. Only use in development/testing.
    """
    from app.models import student  # noqa: F401

    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Database tables dropped")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful (%s)", settings.safe_database_url())
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "connect")
def on_connect(dbapi_conn, connection_record):
    if settings.DEBUG:
        logger.debug("New database connection established")


@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    if settings.DEBUG:
        logger.debug("Connection checked out from pool")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application, before serving requests.
    """
    logger.info("Initializing database...")

    if not check_database_connection():
        raise DatabaseUnavailableError(settings.safe_database_url())

    if settings.DB_RESET_ON_STARTUP:
        drop_database_tables()

    # Schema is derived from the models; there is no migration step
    create_database_tables()

    logger.info("Database initialized")

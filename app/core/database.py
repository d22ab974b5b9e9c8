import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import Settings

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine(config: Settings) -> Engine:
    """
    Create the database engine for one application instance.

    The engine (and its connection pool) is owned by whoever builds it,
    normally ``create_app``, which keeps it on ``app.state``.
    """
    if config.is_sqlite:
        options = {"connect_args": {"check_same_thread": False}}
        if config.DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every session sees an empty database
            options["poolclass"] = StaticPool
        engine = create_engine(config.DATABASE_URL, echo=config.DB_ECHO_SQL, **options)
    else:
        engine = create_engine(
            config.DATABASE_URL,

            # Connection pool settings
            poolclass=QueuePool,
            pool_size=config.DB_POOL_SIZE,
            max_overflow=config.DB_MAX_OVERFLOW,
            pool_timeout=config.DB_POOL_TIMEOUT,
            pool_recycle=config.DB_POOL_RECYCLE,

            # Test connection before using (detect disconnects)
            pool_pre_ping=True,

            echo=config.DB_ECHO_SQL,

            connect_args={
                "connect_timeout": 10,
            }
        )

    if config.DEBUG:
        @event.listens_for(engine, "checkout")
        def receive_checkout(dbapi_conn, connection_record, connection_proxy):
            logger.debug("Connection checked out from pool")

    return engine


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Don't expire objects after commit
    )


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(engine: Engine):
    """
    Create all database tables defined in models.

    Only meant for development and tests. In production, use Alembic migrations.
    """
    # Register every model on Base.metadata
    from app.models import ceramic_class, month, student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def drop_database_tables(engine: Engine):
    """
    Drop all database tables.

    This deletes all data! Only use in development/testing.
    """
    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Database tables dropped")


def check_database_connection(engine: Engine) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(engine: Engine, config: Settings):
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection(engine):
        raise RuntimeError("Cannot connect to database!")

    if config.DB_CREATE_TABLES:
        create_database_tables(engine)

    logger.info("Database initialized")

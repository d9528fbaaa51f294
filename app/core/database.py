from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from .config import settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given URL.

    SQLite gets two adjustments:
    1. ``check_same_thread=False`` so FastAPI's threadpool can share connections
    2. ``PRAGMA foreign_keys=ON`` on every new connection, otherwise
       ``ON DELETE CASCADE`` on grades.student_id is silently ignored

    In-memory SQLite URLs use a StaticPool so every session sees the same database.
    """
    kwargs = {"echo": echo}
    is_sqlite = database_url.startswith("sqlite")

    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            kwargs["poolclass"] = StaticPool
    else:
        # Test connection before using (detect disconnects)
        kwargs["pool_pre_ping"] = True

    new_engine = create_engine(database_url, **kwargs)

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
            logger.debug("New SQLite connection established with foreign keys enabled")

    return new_engine


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO_SQL)

# Primary keys are signed 64-bit integers in the store
ID_MIN = -(2 ** 63)
ID_MAX = 2 ** 63 - 1


def is_storable_id(value: int) -> bool:
    """
    False for ids the driver cannot bind (sqlite3 raises OverflowError).
    Such an id can never match a row.
    """
    return ID_MIN <= value <= ID_MAX


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # Returned rows stay readable after commit
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def _register_models():
    # Import every model so Base.metadata knows about all tables
    from app.models import student, grade  # noqa: F401


def create_database_tables(bind: Engine = None):
    """
    Create all tables defined in models. Safe to call repeatedly.
    """
    _register_models()
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ready")


def drop_database_tables(bind: Engine = None):
    """
    Drop all database tables.

    DANGER: This will delete all data! Only use in development/testing.
    """
    _register_models()
    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=bind or engine)
    logger.info("Database tables dropped")


def check_database_connection(bind: Engine = None) -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with (bind or engine).connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db(bind: Engine = None):
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info("Initializing database...")

    if not check_database_connection(bind):
        raise RuntimeError("Cannot connect to database!")

    create_database_tables(bind)

    logger.info("Database initialized successfully")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    from .config import print_config
    print_config()

    init_db()

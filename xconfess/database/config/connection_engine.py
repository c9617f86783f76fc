"""
Connection Engine (SQLAlchemy)

Purpose
-------
Centralizes database initialization for the application:
- Builds a SQLAlchemy connection URL from environment-backed settings.
- Creates the Engine (connection pool + SQL execution entry point).
- Defines shared MetaData for table and schema objects.
- Exposes a Declarative Base class for ORM models.

Notes
-----
- Uses `URL.create(...)` to keep configuration environment-driven.
- SQLite connections get `PRAGMA foreign_keys = ON` so the `ON DELETE CASCADE`
  and `ON DELETE SET NULL` rules declared on the reaction table are enforced
  there exactly as on PostgreSQL.
- All ORM models must inherit from `declarativeBase`.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL
from sqlalchemy.orm import declarative_base
from sqlalchemy.schema import MetaData
from xconfess.database.config.config import settings

connection_url = URL.create(
    drivername=settings.DB_DRIVER_NAME,
    username=settings.DB_USERNAME,
    password=settings.DB_PASSWORD,
    host=settings.DB_HOST,
    port=settings.DB_PORT,
    database=settings.DB_DATABASE_NAME,
)
"""Constructs the SQLAlchemy connection URL using values from Settings."""

is_sqlite = connection_url.get_backend_name() == "sqlite"

connection_engine = create_engine(
    connection_url,
    echo=settings.DB_ECHO,
    # FastAPI runs sync endpoints in a threadpool
    connect_args={"check_same_thread": False} if is_sqlite else {},
)
"""Engine object: Core interface to the database.
Responsible for managing connections, executing SQL, and pooling.
"""

if is_sqlite:

    @event.listens_for(connection_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


metadata = MetaData()
"""
Metadata object: Stores schema-level information about tables, constraints, indexes, etc. Shared across all models.
"""

declarativeBase = declarative_base(metadata=metadata)
"""Declarative Base: Root class for ORM models.
All model classes should inherit from this to gain ORM features and automatic schema generation.
"""

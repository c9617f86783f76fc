"""
Schema bootstrap
================

Creates missing tables from the ORM metadata and upgrades databases created
before confessions and reactions were linked to users.

Older deployments have ``anonymous_confessions`` and ``reaction`` tables
without a ``user_id`` column. For those, the column is added as a nullable
reference to ``app_user(id)`` with ``ON DELETE SET NULL``.
"""

import logging

from sqlalchemy import Uuid, inspect, text
from sqlalchemy.engine import Engine

from xconfess.database.config.connection_engine import connection_engine, metadata

# Register every entity on the shared metadata before create_all
from xconfess.database.entities import User, AnonymousConfession, Reaction  # noqa: F401

logger = logging.getLogger(__name__)

USER_LINKED_TABLES = ("anonymous_confessions", "reaction")
"""Tables whose rows carry an optional reference to the user that created them."""


def _add_user_column(engine: Engine, table_name: str) -> None:
    column_type = Uuid().compile(dialect=engine.dialect)
    if engine.dialect.name == "sqlite":
        # SQLite cannot add a named constraint through ALTER TABLE
        ddl = (
            f"ALTER TABLE {table_name} ADD COLUMN user_id {column_type} NULL "
            f"REFERENCES app_user(id) ON DELETE SET NULL"
        )
        statements = [ddl]
    else:
        statements = [
            f"ALTER TABLE {table_name} ADD COLUMN IF NOT EXISTS user_id {column_type} NULL",
            f"ALTER TABLE {table_name} ADD CONSTRAINT fk_{table_name}_user "
            f"FOREIGN KEY (user_id) REFERENCES app_user(id) ON DELETE SET NULL",
        ]
    with engine.begin() as conn:
        for statement in statements:
            conn.execute(text(statement))
    logger.info("Added user_id column to %s", table_name)


def initialize_schema(engine: Engine = connection_engine) -> None:
    """
    Create tables and upgrade legacy ones.

    Parameters
    ----------
    engine : Engine
        Engine to run DDL against. Defaults to the application engine.
    """
    try:
        metadata.create_all(engine)
        inspector = inspect(engine)
        for table_name in USER_LINKED_TABLES:
            columns = {col["name"] for col in inspector.get_columns(table_name)}
            if "user_id" not in columns:
                _add_user_column(engine, table_name)
    except Exception as e:
        logger.error("Failed to initialize database schema: %s", e)
        raise

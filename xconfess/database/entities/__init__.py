"""
Entities Package — SQLAlchemy 2.0 ORM Models (UUID + UTC)
=========================================================

The `entities` package defines the ORM models of the application, mapping
database tables to Python classes using SQLAlchemy 2.0-typed mappings.
These classes are consumed by DAOs (`daos` package).

Tech Stack & Conventions
------------------------
- PostgreSQL in production, SQLite for development and tests
- Portable `Uuid` primary keys
- Timezone-aware timestamps (UTC)
- SQLAlchemy 2.0 style `Mapped[...]` + `mapped_column(...)`
- Foreign keys declare their delete rules so the database enforces them

Contents
--------
- User (`app_user`)
    A registered user; read-only here.

- AnonymousConfession (`anonymous_confessions`)
    A confession post with an optional author (`user_id`, SET NULL on delete).

- Reaction (`reaction`)
    An emoji reaction to a confession.
    * `confession_id` — mandatory, CASCADE on delete
    * `user_id` — optional reacting user, SET NULL on delete
"""

from xconfess.database.entities.user import User
from xconfess.database.entities.confession import AnonymousConfession
from xconfess.database.entities.reaction import Reaction

__all__ = ["User", "AnonymousConfession", "Reaction"]

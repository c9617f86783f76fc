"""
The `database` package is responsible for all interactions with the application's database.

Contents:
    - config:
        Settings and the SQLAlchemy engine / declarative base.

    - entities:
        SQLAlchemy entity models (users, confessions, reactions).

    - daos:
        Data Access Objects providing persistence operations for the entities.

    - core:
        Service layer connecting application routers with the database,
        including the reaction workflow.

    - helpers:
        Transaction management and schema bootstrap.
"""

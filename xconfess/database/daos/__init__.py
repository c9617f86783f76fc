"""
DAOs Package — Data Access Layer (SQLAlchemy 2.0)
=================================================

The `daos` package encapsulates all interactions with SQLAlchemy ORM entities,
providing small persistence APIs for the service layer.

Conventions
-----------
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs log and surface exceptions so upper layers decide error policy

Contents
--------
- ReactionDao
    The reaction store:
    * findConfessionWithAuthor(session, confession_id) — confession + eager author, or None
    * save(session, reaction) — inserts a reaction, assigning id/created_at

- UserDao
    * fetchUserById(session, user_id) — resolves the acting user of a request
"""

"""
The `core` package connects the API routers with the database.

Contents
--------
- reaction_service
    `ReactionService`, the reaction workflow (lookup → insert → best-effort
    author notification), plus `ConfessionNotFoundError`.
- funcs
    Transactional lookups for the API layer (acting-user identity).
"""

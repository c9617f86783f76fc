"""
API Package — FastAPI Router • Models • JWT Utils
=================================================

Contents
--------
- fast_api
    FastAPI router:
      • POST /reactions — react to a confession (anonymous or via `token` cookie)
      • GET /health — liveness probe
    `get_reaction_service` wires `ReactionService` with `ReactionDao` and
    `EmailService`; override it to swap collaborators.

- models
    Pydantic data contracts:
      • ReactionDetails (request body)
      • ReactionRead (response)
      • ActingUser (authenticated caller)

- utils
    JWT helpers:
      • verify_token(token) — validates JWTs and extracts the subject
      • get_acting_user — dependency resolving the `token` cookie to an ActingUser

Operational Notes
-----------------
- Security: Auth via HttpOnly `token` cookie (JWT). Never log secrets.
"""

"""
XConfess reactions backend.

Lets users, signed in or anonymous, react with an emoji to a confession and
emails the confession's author about it. The email is best-effort: a failed
delivery never undoes the reaction.

Packages:
    - api: FastAPI router, request/response models, JWT helpers
    - database: settings, engine, entities, DAOs, service layer, helpers
    - notifications: notifier interface and SMTP email service
"""

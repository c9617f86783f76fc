"""
Session scoping for the reaction workflow.

`@transactional` gives a function its own SQLAlchemy session and commits it
when the function returns. Two callers rely on it:

- `ReactionService._record_reaction`: the confession lookup and the reaction
  insert form one unit. It commits before any notification is attempted, and
  a failed insert is rolled back so no partial row remains.
- `get_user_identity`: the read-only lookup behind the `token` cookie.

Nested decorated calls join the session already stored in
`db_session_context` and leave commit and close to the outermost call.
"""

from functools import wraps
from sqlalchemy.orm import sessionmaker
import contextvars
from xconfess.database.config.connection_engine import connection_engine

db_session_context = contextvars.ContextVar("db_session_context", default=None)
"""Session of the outermost `@transactional` call in progress, if any."""

SessionFactory = sessionmaker(bind=connection_engine)
"""Opens sessions on the application engine. Tests use it to seed rows."""


def transactional(func):
    """
    Run `func` inside a session, passed to it as the `session` keyword.

    The session is flushed and committed on return. On any exception it is
    rolled back and the exception propagates unchanged, so callers see the
    original `SQLAlchemyError` (or domain error such as
    `ConfessionNotFoundError`). Values returned out of the unit should be
    plain snapshots: ORM objects are detached once the session closes.
    """
    @wraps(func)
    def wrap_func(*args, **kwargs):
        session = db_session_context.get()
        if session:
            return func(*args, session=session, **kwargs)

        session = SessionFactory()
        token = db_session_context.set(session)

        try:
            result = func(*args, session=session, **kwargs)
            session.flush()
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            db_session_context.reset(token)

        return result

    return wrap_func

"""
Service-layer lookups used by the API layer.

Functions are wrapped with the `@transactional` decorator, which manages
SQLAlchemy sessions and transactions automatically and injects `session`.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from xconfess.api.models import ActingUser
from xconfess.database.daos.user_dao import UserDao
from xconfess.database.helpers.transactionManagement import transactional


@transactional
def get_user_identity(session: Session, user_id: UUID) -> Optional[ActingUser]:
    """
    Load the identity of an authenticated caller.

    Parameters
    ----------
    session : Session
        Active SQLAlchemy session (injected by @transactional).
    user_id : UUID
        Subject of a verified access token.

    Returns
    -------
    ActingUser | None
        The caller's id and username, or None if the user no longer exists.
    """
    user = UserDao().fetchUserById(session, user_id)
    if user is None:
        return None
    return ActingUser(id=user.id, username=user.username)

"""
User DAO

Purpose
-------
Read-only access to the `User` entity. Users are registered by the identity
service; this backend only needs to resolve the user behind an access token.

Design
------
- The DAO expects an active SQLAlchemy `Session` supplied by the caller.

Usage
-----
.. code-block:: python

    from xconfess.database.helpers.transactionManagement import SessionFactory
    from xconfess.database.daos.user_dao import UserDao

    dao = UserDao()
    with SessionFactory() as session:
        user = dao.fetchUserById(session, some_uuid)   # User | None
"""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from xconfess.database.entities.user import User

logger = logging.getLogger(__name__)


class UserDao:
    """Data Access Object (DAO) for reading User entities."""

    def fetchUserById(self, session: Session, user_id: UUID) -> Optional[User]:
        """
        Fetch a user by primary key.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        user_id : UUID
            Identifier of the user.

        Returns
        -------
        User | None
            The user, or None if no such user exists.
        """
        try:
            return session.get(User, user_id)
        except Exception as e:
            logger.error("Error in UserDao.fetchUserById(%s): %s", user_id, e)
            raise

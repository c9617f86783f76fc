"""
Reaction DAO — Confession Lookup & Reaction Insert
==================================================

Purpose
-------
Data-access layer behind the reaction workflow:
- Fetch a confession together with its author (the author may be absent).
- Insert a new, immutable `Reaction` row.

Transaction Model
-----------------
- The DAO works on the session it is given and never commits. The caller
  (a `@transactional` function) owns commit/rollback, so a failed insert
  leaves no partial row behind.
- `save` flushes immediately: foreign-key and uniqueness violations surface
  inside the call instead of at commit time.

Error Handling
--------------
- Errors are logged and re-raised for the caller to handle.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from xconfess.database.entities.confession import AnonymousConfession
from xconfess.database.entities.reaction import Reaction

logger = logging.getLogger(__name__)


class ReactionDao:
    """
    Data Access Object for `Reaction` records and the confessions they target.

    Notes:
        - No update or delete method: reactions are append-only and disappear
          only when their confession is deleted.
    """

    def findConfessionWithAuthor(self, session: Session, confession_id: UUID) -> Optional[AnonymousConfession]:
        """
        Fetch a confession with its `user` relation populated.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session.
        confession_id : UUID
            Identifier of the confession. Must already be a valid UUID.

        Returns
        -------
        AnonymousConfession | None
            The confession (its `user` may be None), or None when no
            confession has that id.
        """
        try:
            return (
                session.query(AnonymousConfession)
                .options(joinedload(AnonymousConfession.user))
                .filter(AnonymousConfession.id == confession_id)
                .one_or_none()
            )
        except Exception as e:
            logger.error("Error in ReactionDao.findConfessionWithAuthor(%s): %s", confession_id, e)
            raise

    def save(self, session: Session, reaction: Reaction) -> Reaction:
        """
        Insert a new reaction.

        Parameters
        ----------
        session : Session
            Active SQLAlchemy session (transaction boundary controlled by the caller).
        reaction : Reaction
            The reaction to persist. `id` and `created_at` are assigned when unset.

        Returns
        -------
        Reaction
            The flushed reaction.

        Raises
        ------
        sqlalchemy.exc.SQLAlchemyError
            If the insert violates a constraint (e.g. the confession was
            deleted after lookup) or the database is unreachable.
        """
        if reaction.id is None:
            reaction.id = uuid.uuid4()
        if reaction.created_at is None:
            reaction.created_at = datetime.now(timezone.utc)
        try:
            session.add(reaction)
            session.flush()
            return reaction
        except Exception as e:
            logger.error("Error in ReactionDao.save for confession %s: %s", reaction.confession_id, e)
            raise

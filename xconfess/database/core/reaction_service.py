"""
Reaction workflow.

`ReactionService.create_reaction` looks up the target confession with its
author, records the reaction in its own transaction and then, once that
transaction has committed, notifies the author by email.

Failure policy
--------------
- Unknown confession: `ConfessionNotFoundError`, nothing written, nobody notified.
- Persistence errors propagate unchanged and nobody is notified.
- Notification errors never propagate. They are logged and dropped; the
  reaction is already committed and is returned as usual.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from xconfess.api.models import ActingUser, ReactionDetails, ReactionRead
from xconfess.database.daos.reaction_dao import ReactionDao
from xconfess.database.entities.reaction import Reaction
from xconfess.database.helpers.transactionManagement import transactional
from xconfess.notifications.base import ReactionNotifier

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100
TRUNCATION_MARKER = "..."
ANONYMOUS_REACTOR = "Anonymous"
DEFAULT_RECIPIENT_NAME = "User"


class ConfessionNotFoundError(Exception):
    """The confession a reaction targets does not exist."""

    def __init__(self, confession_id):
        super().__init__(f"Confession not found: {confession_id}")
        self.confession_id = confession_id


@dataclass(frozen=True)
class AuthorNotification:
    """Everything needed to notify a confession's author, detached from the session."""

    reaction_id: UUID
    recipient_email: str
    recipient_name: str
    reactor_name: str
    content_preview: str
    emoji: str


def build_content_preview(content: Optional[str], limit: int = PREVIEW_LENGTH) -> str:
    """Cut `content` to `limit` characters, marking the cut with "..."."""
    content = content or ""
    if len(content) > limit:
        return content[:limit] + TRUNCATION_MARKER
    return content


class ReactionService:
    """
    Orchestrates reaction creation.

    Parameters
    ----------
    reaction_dao : ReactionDao
        The reaction store.
    notifier : ReactionNotifier
        Delivers author notifications.
    """

    def __init__(self, reaction_dao: ReactionDao, notifier: ReactionNotifier):
        self.reaction_dao = reaction_dao
        self.notifier = notifier

    def create_reaction(
        self,
        data: ReactionDetails,
        reactor: Optional[ActingUser] = None,
        schedule: Optional[Callable] = None,
    ) -> ReactionRead:
        """
        Record a reaction and notify the confession's author.

        Parameters
        ----------
        data : ReactionDetails
            Target confession id and emoji.
        reactor : ActingUser | None
            The authenticated caller; None for an anonymous reaction.
        schedule : callable, optional
            `schedule(fn, *args)` defers the notification (e.g.
            `BackgroundTasks.add_task`). Without it the notification is sent
            before returning.

        Returns
        -------
        ReactionRead
            The persisted reaction.

        Raises
        ------
        ConfessionNotFoundError
            If the confession does not exist.
        sqlalchemy.exc.SQLAlchemyError
            If the reaction could not be stored.
        """
        try:
            confession_id = UUID(data.confession_id)
        except ValueError:
            # A malformed id cannot name any confession
            raise ConfessionNotFoundError(data.confession_id) from None

        reaction, notification = self._record_reaction(
            confession_id=confession_id, emoji=data.emoji, reactor=reactor
        )

        if notification is None:
            logger.debug("No notification target for reaction %s", reaction.id)
        elif schedule is not None:
            schedule(self._notify_author, notification)
        else:
            self._notify_author(notification)

        return reaction

    @transactional
    def _record_reaction(self, session: Session, confession_id: UUID, emoji: str, reactor: Optional[ActingUser]):
        confession = self.reaction_dao.findConfessionWithAuthor(session, confession_id)
        if confession is None:
            raise ConfessionNotFoundError(confession_id)

        if reactor is not None:
            reaction = Reaction(emoji=emoji, confession_id=confession.id, user_id=reactor.id)
            reactor_name = reactor.username or ANONYMOUS_REACTOR
        else:
            reaction = Reaction(emoji=emoji, confession_id=confession.id)
            reactor_name = ANONYMOUS_REACTOR

        saved = self.reaction_dao.save(session, reaction)
        result = ReactionRead.model_validate(saved)

        # "No author" and "author without email" are the same outcome: no target
        author = confession.user
        if author is None or not (author.email or "").strip():
            return result, None

        notification = AuthorNotification(
            reaction_id=result.id,
            recipient_email=author.email.strip(),
            recipient_name=author.username or DEFAULT_RECIPIENT_NAME,
            reactor_name=reactor_name,
            content_preview=build_content_preview(confession.message),
            emoji=emoji,
        )
        return result, notification

    def _notify_author(self, notification: AuthorNotification) -> None:
        # Isolation boundary: a lost notification must not fail the reaction.
        try:
            self.notifier.send_reaction_notification(
                notification.recipient_email,
                notification.recipient_name,
                notification.reactor_name,
                notification.content_preview,
                notification.emoji,
            )
        except Exception as e:
            logger.error(
                "Failed to send reaction notification to %s for reaction %s: %s",
                notification.recipient_email,
                notification.reaction_id,
                e,
                exc_info=True,
                extra={
                    "recipient": notification.recipient_email,
                    "reaction_id": str(notification.reaction_id),
                },
            )
            return
        logger.info("Reaction notification sent to %s", notification.recipient_email)

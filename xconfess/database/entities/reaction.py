"""
Reaction ORM Model
==================

The ``Reaction`` ORM model records an emoji reaction to a confession. It maps
to the ``reaction`` table and is append-only: rows are created once and never
updated.

Key features
~~~~~~~~~~~~
- Random UUID primary key (``id``), never sequential
- Free-form ``emoji`` token
- Mandatory confession (``confession_id`` → ``anonymous_confessions.id``,
  ``ON DELETE CASCADE``): a reaction cannot outlive its confession
- Optional reacting user (``user_id`` → ``app_user.id``, ``ON DELETE SET NULL``):
  the reaction survives the deletion of the user who made it
- Timezone-aware ``created_at`` timestamp (UTC)

"""

from xconfess.database.config.connection_engine import declarativeBase
from sqlalchemy import ForeignKey, DateTime, VARCHAR, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import Optional
from uuid import UUID
from datetime import datetime

from xconfess.database.entities.confession import AnonymousConfession
from xconfess.database.entities.user import User


class Reaction(declarativeBase):
    """
    ORM model for the `reaction` table.

    Attributes
    ----------
    id : UUID
        Primary key, assigned by the reaction store when saved.
    emoji : str
        The reaction symbol.
    confession_id : UUID
        Confession being reacted to.
    user_id : UUID | None
        The reacting user; None for anonymous reactions.
    created_at : datetime
        Creation timestamp, assigned by the reaction store when saved.
    """

    __tablename__ = "reaction"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True
    )

    emoji: Mapped[str] = mapped_column(
        VARCHAR(32), nullable=False
    )

    confession_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("anonymous_confessions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    confession: Mapped[AnonymousConfession] = relationship(back_populates="reactions")

    user: Mapped[Optional[User]] = relationship(User)

    def __init__(self, emoji: str, confession_id: UUID, user_id: Optional[UUID] = None):
        """
        Parameters
        ----------
        emoji : str
            The reaction symbol.
        confession_id : UUID
            Confession being reacted to.
        user_id : UUID | None, optional
            The reacting user; leave unset for anonymous reactions.
        """
        self.emoji = emoji
        self.confession_id = confession_id
        self.user_id = user_id

    def __str__(self) -> str:
        return (
            f"Reaction: id:{self.id}, emoji: {self.emoji}, "
            f"confession: {self.confession_id}, user: {self.user_id}"
        )

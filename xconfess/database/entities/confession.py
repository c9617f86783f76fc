"""
AnonymousConfession ORM Model
=============================

The ``AnonymousConfession`` model represents a confession post stored in the
``anonymous_confessions`` table. Confessions are authored and listed by other
parts of the platform; this backend only reads them when a reaction arrives.

Key features
~~~~~~~~~~~~
- UUID primary key (``id``)
- Text body (``message``) used for notification previews
- Optional author (``user_id`` → ``app_user.id``, ``ON DELETE SET NULL``);
  fully anonymous confessions have no author at all
- ``reactions`` collection; deleting a confession deletes its reactions
  (enforced by the ``ON DELETE CASCADE`` rule on ``reaction.confession_id``)
"""

from xconfess.database.config.connection_engine import declarativeBase
from sqlalchemy import ForeignKey, DateTime, TEXT, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from typing import List, Optional, TYPE_CHECKING
from uuid import UUID
import uuid
from datetime import datetime, timezone

from xconfess.database.entities.user import User

if TYPE_CHECKING:
    from xconfess.database.entities.reaction import Reaction


class AnonymousConfession(declarativeBase):
    """
    ORM model for the `anonymous_confessions` table.

    Attributes
    ----------
    id : UUID
        Primary key of the confession.
    message : str
        Body of the confession.
    user_id : UUID | None
        Author of the confession, if known.
    created_at : datetime
        Publication timestamp (UTC).
    """

    __tablename__ = "anonymous_confessions"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True
    )

    message: Mapped[str] = mapped_column(
        TEXT, nullable=False, default=""
    )

    user_id: Mapped[Optional[UUID]] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("app_user.id", ondelete="SET NULL"), nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    user: Mapped[Optional[User]] = relationship(User)
    """The author, loaded eagerly by the reaction store when notifying."""

    reactions: Mapped[List["Reaction"]] = relationship(
        back_populates="confession",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __init__(self, message: str, user_id: Optional[UUID] = None, confession_id: Optional[UUID] = None):
        self.id = confession_id or uuid.uuid4()
        self.message = message
        self.user_id = user_id

    def __str__(self) -> str:
        return f"Confession: id:{self.id}, author: {self.user_id}"

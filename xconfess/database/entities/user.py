"""
User ORM Model
==============

The ``User`` ORM model represents a registered user in the system. It maps to the
``app_user`` table. Users are created and authenticated by the identity
service; this backend reads them to resolve the acting user of a request and
the author of a confession.

Key features
~~~~~~~~~~~~
- UUID primary key (``id``)
- Username used as display name in notifications
- Optional email address (no email means no notifications)
- Hashed password column owned by the identity service

"""

from xconfess.database.config.connection_engine import declarativeBase
from sqlalchemy import VARCHAR, TEXT, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from typing import Optional
from uuid import UUID
import uuid
from datetime import datetime, timezone


class User(declarativeBase):
    """
    ORM model for the `app_user` table.

    Attributes
    ----------
    id : UUID
        Primary key. Unique identifier for the user.
    username : str
        Display name chosen by the user (max 255 chars).
    email : str | None
        Email address of the user, if any.
    password : str
        Hashed password of the user.
    created_at : datetime
        Registration timestamp (UTC).
    """

    __tablename__ = "app_user"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True
    )
    """Primary key. UUID of the user."""

    username: Mapped[str] = mapped_column(
        VARCHAR(255), nullable=False, unique=True
    )
    """Username of the user (max length 255)."""

    email: Mapped[Optional[str]] = mapped_column(
        VARCHAR(255), nullable=True
    )
    """Email address of the user (max length 255)."""

    password: Mapped[str] = mapped_column(
        TEXT, nullable=False
    )
    """Hashed password of the user."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    """Datetime when the user registered. Defaults to current UTC time."""

    def __init__(self, username: str, password: str, email: Optional[str] = None, user_id: Optional[UUID] = None):
        self.id = user_id or uuid.uuid4()
        self.username = username
        self.password = password
        self.email = email

    def __str__(self) -> str:
        return f"User: id:{self.id}, username: {self.username}, email: {self.email}"

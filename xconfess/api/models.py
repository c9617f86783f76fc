"""
Pydantic models used for request/response validation and API data contracts.

Each class defines the structure of data expected in API endpoints, ensuring
validation and automatic OpenAPI schema generation.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ReactionDetails(BaseModel):
    """
    Body of a reaction request.
    """
    confession_id: str = Field(
        ...,
        min_length=1,
        description="Identifier of the confession being reacted to.",
        examples=["1b4e28ba-2fa1-11d2-883f-0016d3cca427"],
    )
    emoji: str = Field(
        ...,
        min_length=1,
        max_length=32,
        pattern=r"^[^\x00-\x1f\x7f]+$",
        description="The reaction symbol. Control characters are rejected.",
        examples=["❤️"],
    )


class ReactionRead(BaseModel):
    """
    A persisted reaction as returned to API clients.
    """
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    """Random identifier of the reaction."""
    emoji: str
    """The reaction symbol."""
    confession_id: UUID
    """The confession that was reacted to."""
    user_id: Optional[UUID] = None
    """The reacting user, or None for an anonymous reaction."""
    created_at: datetime
    """When the reaction was recorded."""


class ActingUser(BaseModel):
    """
    The authenticated caller of a request, as supplied by the identity layer.
    Absent (None) for anonymous callers.
    """
    id: UUID
    """Identifier of the user."""
    username: str
    """Display name of the user."""

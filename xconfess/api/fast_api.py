"""
FastAPI Router — Reactions
==========================

Purpose
-------
Defines the HTTP API for reacting to confessions:
- `POST /reactions` records an emoji reaction, anonymous or authenticated
- `GET /health` liveness probe

Key Notes
---------
- Input validation via Pydantic models in `xconfess.api.models`.
- Auth cookie: `token` (JWT). Optional: without it the reaction is anonymous.
- The author notification is sent as a background task, after the response.
"""

import logging
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from xconfess.api.models import ActingUser, ReactionDetails, ReactionRead
from xconfess.api.utils import get_acting_user
from xconfess.database.core.reaction_service import ConfessionNotFoundError, ReactionService
from xconfess.database.daos.reaction_dao import ReactionDao
from xconfess.notifications.email_service import EmailService

logger = logging.getLogger(__name__)

router = APIRouter()
"""Creates the FastAPI router in which we define its routes"""


def get_reaction_service() -> ReactionService:
    """Wire the reaction workflow with its store and notifier."""
    return ReactionService(reaction_dao=ReactionDao(), notifier=EmailService())


@router.post("/reactions", response_model=ReactionRead, status_code=201)
def add_reaction(
    data: ReactionDetails,
    background_tasks: BackgroundTasks,
    reactor: Optional[ActingUser] = Depends(get_acting_user),
    service: ReactionService = Depends(get_reaction_service),
):
    """React to a confession.

    Request body:
        ReactionDetails {confession_id, emoji}

    Response:
        201: the stored reaction
        401: invalid or expired `token` cookie
        404: no such confession
        500: the reaction could not be stored
    """
    try:
        return service.create_reaction(data, reactor=reactor, schedule=background_tasks.add_task)
    except ConfessionNotFoundError:
        raise HTTPException(status_code=404, detail="Confession not found")
    except SQLAlchemyError as e:
        logger.exception("Could not store reaction to %s: %s", data.confession_id, e)
        raise HTTPException(status_code=500, detail="Could not save reaction")


@router.get("/health")
def health():
    """Liveness probe."""
    return {"status": "ok"}

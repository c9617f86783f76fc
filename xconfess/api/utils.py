"""
JWT verification and the request dependency that turns the `token` cookie
into the acting user. Tokens are issued by the identity service.

Functions
---------
verify_token(token: str) -> str | None
    Verify a JWT's signature & expiration and return the subject (`sub`) if valid.
get_acting_user(token) -> ActingUser | None
    FastAPI dependency; None for anonymous callers.

Environment contract (from `settings`)
--------------------------------------
SECRET_KEY : str
    HMAC signing key for JWTs.
ALGORITHM : str
    JWT signing algorithm (e.g., "HS256").
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Cookie, HTTPException
from jose import jwt, JWTError

from xconfess.api.models import ActingUser
from xconfess.database.config.config import settings
from xconfess.database.core.funcs import get_user_identity

logger = logging.getLogger(__name__)


def verify_token(token: str) -> Optional[str]:
    """
    Verify a JWT and return its subject.

    Returns
    ----------
    str | None
        The `sub` claim if the token is valid, otherwise None.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload.get("sub")
    except JWTError as e:
        logger.info("Rejected access token: %s", e)
        return None


def get_acting_user(token: Optional[str] = Cookie(None)) -> Optional[ActingUser]:
    """
    Resolve the caller of a request from the `token` cookie.

    Returns None when no cookie is sent (anonymous caller). A cookie that
    does not verify, or that names a user who no longer exists, is a 401.
    """
    if not token:
        return None
    subject = verify_token(token)
    if not subject:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    try:
        user_id = UUID(subject)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    user = get_user_identity(user_id=user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Unknown user")
    return user

# taskapi/core/tokens.py
"""Session (JWT) and refresh token issuance.

Session tokens are stateless: they carry the user's identity claims and an
absolute expiry and are never stored. Refresh tokens are opaque random values
persisted through ``refresh_token_crud``.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session

from taskapi.core.config import settings
from taskapi.core.errors import SigningError, TokenExpired, TokenInvalid
from taskapi.crud.refresh_token import refresh_token_crud
from taskapi.models.refresh_token import RefreshToken
from taskapi.models.user import User
from taskapi.schemas.token import SessionClaims


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _secret(secret: Optional[str]) -> str:
    key = secret if secret is not None else settings.JWT_SECRET
    if not key:
        raise SigningError("JWT secret is not configured")
    return key


def issue_session_token(user: User, now: Optional[datetime] = None, secret: Optional[str] = None) -> str:
    """Sign the identity claims of ``user`` with a one hour absolute expiry."""
    key = _secret(secret)
    expire = (now or _now()) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload: Dict[str, Any] = {
        "userId": user.id,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "email": user.email,
        "exp": int(expire.timestamp()),
    }
    try:
        return jwt.encode(payload, key, algorithm=settings.JWT_ALGORITHM)
    except JWTError as exc:
        raise SigningError(str(exc)) from exc


def verify_session_token(token: str, now: Optional[datetime] = None, secret: Optional[str] = None) -> Dict[str, Any]:
    """Return the claims of a valid token.

    Raises ``TokenInvalid`` for a bad signature or a malformed token and
    ``TokenExpired`` once ``now`` reaches the ``exp`` claim.
    """
    key = _secret(secret)
    if not token:
        raise TokenInvalid()
    try:
        # exp conferido abaixo para aceitar um "now" explícito
        payload = jwt.decode(token, key, algorithms=[settings.JWT_ALGORITHM], options={"verify_exp": False})
    except JWTError as exc:
        raise TokenInvalid() from exc
    if not isinstance(payload, dict):
        raise TokenInvalid()

    try:
        claims = SessionClaims.model_validate(payload)
    except ValidationError as exc:
        raise TokenInvalid() from exc
    if claims.exp is None:
        raise TokenInvalid()
    if int((now or _now()).timestamp()) >= claims.exp:
        raise TokenExpired()
    return payload


def issue_refresh_token(db: Session, user: User, now: Optional[datetime] = None) -> RefreshToken:
    return refresh_token_crud.issue(db, user, now=now)


def issue_tokens_for(db: Session, user: User) -> Dict[str, str]:
    now = _now()
    token = issue_session_token(user, now=now)
    refresh = issue_refresh_token(db, user, now=now)
    return {"token": token, "refresh_token": refresh.token}

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from taskapi.core.errors import TokenInvalid
from taskapi.core.tokens import verify_session_token
from taskapi.crud.user import user_crud
from taskapi.db.session import get_db
from taskapi.models.user import User

__all__ = ["get_db", "get_bearer_token", "get_current_user"]


# ----------------------------------------------------------------------
# Lê o Bearer do header Authorization
# ----------------------------------------------------------------------
def get_bearer_token(authorization: str = Header(None, alias="Authorization")) -> str:
    if not authorization:
        raise TokenInvalid("Missing Authorization header")
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise TokenInvalid("Invalid Authorization header")
    return parts[1]


# ----------------------------------------------------------------------
# Usuário autenticado da requisição; repassado explicitamente aos handlers
# ----------------------------------------------------------------------
def get_current_user(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> User:
    claims = verify_session_token(token)
    user = user_crud.get_by_email(db, str(claims.get("email") or ""))
    if not user:
        raise TokenInvalid("User no longer exists")
    return user

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from taskapi.core.config import settings
from taskapi.crud.base import CRUDBase
from taskapi.models.refresh_token import RefreshToken
from taskapi.models.user import User


def generate_refresh_token_value() -> str:
    return secrets.token_urlsafe(48)


class CRUDRefreshToken(CRUDBase[RefreshToken]):
    def issue(self, db: Session, user: User, now: Optional[datetime] = None) -> RefreshToken:
        # write-only: tokens anteriores do usuário não são lidos nem revogados
        now = now or datetime.now(timezone.utc)
        row = RefreshToken(
            token=generate_refresh_token_value(),
            user_id=user.id,
            created_at=now,
            expired_at=now + timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS),
        )
        return self.save(db, row)


refresh_token_crud = CRUDRefreshToken(RefreshToken)

from typing import Optional

from sqlalchemy.orm import Session

from taskapi.core.security import get_password_hash
from taskapi.crud.base import CRUDBase
from taskapi.models.user import User
from taskapi.schemas.user import RegisterIn


class CRUDUser(CRUDBase[User]):
    def build(self, obj_in: RegisterIn) -> User:
        return User(
            first_name=obj_in.first_name,
            last_name=obj_in.last_name,
            email=obj_in.email,
            password=get_password_hash(obj_in.password),
        )

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return self.find_one(db, email=email)

    def get_unverified_by_email(self, db: Session, email: str) -> Optional[User]:
        return self.find_one(db, User.email_verified_at.is_(None), email=email)


user_crud = CRUDUser(User)

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from taskapi.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """Uniform store access (find, save, remove) for one entity class."""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.get(self.model, id)

    def find_one(self, db: Session, *criteria, **filters) -> Optional[ModelType]:
        stmt = select(self.model).where(*criteria).filter_by(**filters).limit(1)
        return db.execute(stmt).scalars().first()

    def find(
        self,
        db: Session,
        *criteria,
        order_by: tuple = (),
        offset: int = 0,
        limit: Optional[int] = None,
        **filters,
    ) -> List[ModelType]:
        stmt = select(self.model).where(*criteria).filter_by(**filters)
        if order_by:
            stmt = stmt.order_by(*order_by)
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(db.execute(stmt).scalars().all())

    def exists(self, db: Session, *criteria, **filters) -> bool:
        inner = select(self.model).where(*criteria).filter_by(**filters)
        return bool(db.scalar(select(inner.exists())))

    def save(self, db: Session, obj: ModelType, commit: bool = True) -> ModelType:
        db.add(obj)
        if commit:
            db.commit()
            db.refresh(obj)
        else:
            db.flush()
        return obj

    def remove(self, db: Session, obj: ModelType) -> ModelType:
        db.delete(obj); db.commit()
        return obj

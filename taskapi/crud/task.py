from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from taskapi.crud.base import CRUDBase
from taskapi.models.task import Task
from taskapi.models.user import User


class CRUDTask(CRUDBase[Task]):
    def list_for_owner(self, db: Session, owner: User, page: int, per_page: int) -> List[Task]:
        return self.find(
            db,
            user_id=owner.id,
            order_by=(Task.created_at.desc(), Task.id.desc()),
            offset=(page - 1) * per_page,
            limit=per_page,
        )

    def get_owned(self, db: Session, task_id: int, owner: User) -> Optional[Task]:
        # tarefa de outro usuário é tratada como inexistente
        return self.find_one(db, id=task_id, user_id=owner.id)

    def create_for_owner(self, db: Session, owner: User, title: str, description: str) -> Task:
        task = Task(
            title=title,
            description=description,
            completed=False,
            user_id=owner.id,
            created_at=datetime.now(timezone.utc),
        )
        return self.save(db, task)

    def update(self, db: Session, task: Task, data: Dict[str, Any]) -> Task:
        for field, value in data.items():
            setattr(task, field, value)
        task.updated_at = datetime.now(timezone.utc)
        return self.save(db, task)


task_crud = CRUDTask(Task)

# taskapi/api/tasks.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from taskapi.api.deps import get_current_user, get_db
from taskapi.core.errors import TaskNotFound
from taskapi.crud.task import task_crud
from taskapi.models.user import User
from taskapi.schemas.task import (
    TaskCreate,
    TaskData,
    TaskListData,
    TaskListResponse,
    TaskOut,
    TaskResponse,
    TaskUpdate,
)

router = APIRouter()

DEFAULT_PER_PAGE = 10
DEFAULT_PAGE = 1
MAX_PAGING_VALUE = 2**31 - 1


def _positive_int(raw: Optional[str], default: int) -> int:
    # ausente, não numérico, < 1 ou acima de 32 bits cai no padrão
    try:
        value = int(raw) if raw is not None else default
    except (TypeError, ValueError):
        return default
    return value if 1 <= value <= MAX_PAGING_VALUE else default


@router.get("", response_model=TaskListResponse)
def list_tasks(
    per_page: Optional[str] = Query(default=None),
    page: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    rows = task_crud.list_for_owner(
        db,
        user,
        page=_positive_int(page, DEFAULT_PAGE),
        per_page=_positive_int(per_page, DEFAULT_PER_PAGE),
    )
    return TaskListResponse(data=TaskListData(tasks=[TaskOut.model_validate(t) for t in rows]))


@router.post("", response_model=TaskResponse)
def create_task(body: TaskCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    task = task_crud.create_for_owner(db, user, body.title, body.description)
    return TaskResponse(data=TaskData(task=TaskOut.model_validate(task)))


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    body: TaskUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    task = task_crud.get_owned(db, task_id, user)
    if not task:
        raise TaskNotFound(f"Task {task_id} not found")

    # completed omitido mantém o valor atual
    data = body.model_dump(exclude_none=True)
    task = task_crud.update(db, task, data)
    return TaskResponse(data=TaskData(task=TaskOut.model_validate(task)))


@router.delete("/{task_id}", response_model=TaskResponse)
def delete_task(task_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    task = task_crud.get_owned(db, task_id, user)
    if not task:
        raise TaskNotFound(status_code=400)

    out = TaskOut.model_validate(task)
    task_crud.remove(db, task)
    return TaskResponse(data=TaskData(task=out))

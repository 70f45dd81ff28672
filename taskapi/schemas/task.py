from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)


class TaskUpdate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    completed: Optional[bool] = None


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    description: str
    completed: bool
    user_id: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class TaskData(BaseModel):
    task: TaskOut


class TaskListData(BaseModel):
    tasks: List[TaskOut]


class TaskResponse(BaseModel):
    status: str = "success"
    data: TaskData


class TaskListResponse(BaseModel):
    status: str = "success"
    data: TaskListData

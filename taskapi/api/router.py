# taskapi/api/router.py
from fastapi import APIRouter

from taskapi.api import auth, tasks

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])

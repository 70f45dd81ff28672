# taskapi/db/base.py
from taskapi.db.base_class import Base

# IMPORTE TODOS OS MODELS AQUI (registra as tabelas no metadata)
from taskapi.models.user import User  # noqa: F401
from taskapi.models.task import Task  # noqa: F401
from taskapi.models.refresh_token import RefreshToken  # noqa: F401

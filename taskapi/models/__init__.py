# Carrega módulos para registrar tabelas no metadata:
import taskapi.models.user           # noqa: F401
import taskapi.models.task           # noqa: F401
import taskapi.models.refresh_token  # noqa: F401

__all__: list[str] = []

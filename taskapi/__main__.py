import uvicorn

from taskapi.core.config import settings

if __name__ == "__main__":
    uvicorn.run("taskapi.main:api", host="0.0.0.0", port=settings.PORT, log_config=None)

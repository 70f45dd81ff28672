# taskapi/core/config.py
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _default_database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url and url.strip():
        return url
    data_dir = os.path.abspath(os.getenv("DATA_DIR", "./data"))
    os.makedirs(data_dir, exist_ok=True)
    return f"sqlite:///{os.path.join(data_dir, 'tasks.db')}"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    DATABASE_URL: str = Field(default_factory=_default_database_url)

    # assinatura do JWT e do link de verificação usam o mesmo segredo
    JWT_SECRET: str = Field(default_factory=lambda: os.getenv("JWT_SECRET", "CHANGE_ME_SUPER_SECRET"))
    JWT_ALGORITHM: str = Field(default_factory=lambda: os.getenv("JWT_ALGORITHM", "HS256"))
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default_factory=lambda: int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")))
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default_factory=lambda: int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", "1")))
    VERIFICATION_LINK_TTL_MINUTES: int = Field(default_factory=lambda: int(os.getenv("VERIFICATION_LINK_TTL_MINUTES", "10")))
    BCRYPT_ROUNDS: int = Field(default_factory=lambda: int(os.getenv("BCRYPT_ROUNDS", "12")))

    APP_URL: str = Field(default_factory=lambda: os.getenv("APP_URL", "http://localhost:3000"))
    PORT: int = Field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*").split(","))

    # SMTP
    SMTP_HOST: str = Field(default_factory=lambda: os.getenv("SMTP_HOST", "sandbox.smtp.mailtrap.io"))
    SMTP_PORT: int = Field(default_factory=lambda: int(os.getenv("SMTP_PORT", "2525")))
    SMTP_USER: str = Field(default_factory=lambda: os.getenv("SMTP_USER", ""))
    SMTP_PASS: str = Field(default_factory=lambda: os.getenv("SMTP_PASS", ""))
    SMTP_STARTTLS: bool = Field(default_factory=lambda: _env_bool("SMTP_STARTTLS", "false"))
    SMTP_TIMEOUT_SECONDS: int = Field(default_factory=lambda: int(os.getenv("SMTP_TIMEOUT_SECONDS", "10")))
    MAIL_FROM_ADDRESS: str = Field(default_factory=lambda: os.getenv("MAIL_FROM_ADDRESS", "info@app.com"))


settings = Settings()

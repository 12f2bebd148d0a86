# backend/withapp/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):

    PROJECT_NAME: str = "with"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # ── Database ─────────────────────────────────────────────
    DATABASE_URL: str

    # ── JWT ──────────────────────────────────────────────────
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 14

    # ── Communauté ───────────────────────────────────────────
    # Politique actuelle : une seule affiliation par déploiement
    COMMUNITY_AFFILIATION: str = "with"
    ADMIN_EMAIL: Optional[str] = None
    PASSWORD_MIN_LENGTH: int = 6

    # Fuseau de référence pour la règle "un vote par jour"
    VOTE_DAY_TIMEZONE: str = "UTC"


    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        extra='ignore'
        )

settings = Settings()

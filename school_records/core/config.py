# school_records/core/config.py
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "School Records API"
    API_PREFIX: str = "/api/v1"

    DATABASE_URL: str = "sqlite:///./school.db"
    DB_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    LOG_LEVEL: str = "INFO"

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    class Config:
        env_file = ".env"


settings = Settings()

from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./dev.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]
    LOG_LEVEL: str = "INFO"
    DEFAULT_CHANGED_BY: str = "system"
    EXPORT_FILENAME: str = "products.csv"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    PROJECT_NAME: str = "Quiz App Backend"
    LOG_LEVEL: str = "INFO"

    # Storage: "memory" keeps records for the process lifetime only,
    # "database" persists them through SQLAlchemy at DATABASE_URL
    STORAGE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./app.db"

    # Quiz defaults
    DEFAULT_QUIZ_ID: str = "quiz-1"
    SEED_SAMPLE_QUIZ: bool = True

    # Comma-separated list of frontend origins
    CORS_ALLOW_ORIGINS: str = "http://localhost:3000"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


settings = Settings()

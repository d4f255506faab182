"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./plex-requests.db"
    TMDB_API_KEY: str = ""
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_TIMEOUT: float = 10.0
    CORS_ORIGINS: str = "http://localhost:3000"
    ADMIN_PASSWORD: str = "admin123"
    COMPLETED_VISIBILITY_DAYS: int = 60
    REQUESTS_PER_PAGE: int = 25
    SEED_SAMPLE_DATA: bool = False
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    class Config:
        env_file = ".env"


settings = Settings()

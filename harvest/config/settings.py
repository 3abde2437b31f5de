from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    """
    Configuration settings for the harvest pipeline.
    """

    # Delivery endpoint
    BACKEND_URL: str = "http://localhost:5000"
    BULK_REPLACE_PATH: str = "/api/jobs/bulk-replace"
    HEALTH_PATH: str = "/api/health"
    REQUEST_TIMEOUT: float = 10.0  # seconds
    BATCH_SIZE: int = 100

    # Retries
    MAX_RETRIES: int = 3
    RETRY_BASE_DELAY: float = 1.0  # seconds, doubled on every retry

    # Producers
    CONCURRENCY: int = 5
    # Legacy hint for browser-driven producers, passed through untouched.
    HEADLESS: bool = True
    # Comma separated "package.module:attribute" paths.
    PRODUCERS: str = ""

    # Reporting
    TIMEZONE: str = "Asia/Kolkata"
    SUMMARY_FILE: str = "scrape_summary.txt"
    LOG_LEVEL: str = "INFO"


settings = Settings()

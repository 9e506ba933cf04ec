"""Configuration settings for CronLens."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    # Evaluation
    default_run_count: int = 5
    max_run_count: int = 100
    search_limit_seconds: int = 1_000_000  # ~11.5 days of forward search
    worker_threads: int = 4

    # Logging
    log_level: str = "INFO"
    log_file: str = ""

    class Config:
        env_prefix = "CRONLENS_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

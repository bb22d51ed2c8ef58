from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8080
    youtube_api_key: str = ""
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"
    request_timeout: float = 10.0
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "frozen": True}


@lru_cache
def get_settings() -> Settings:
    return Settings()

import logging
from typing import List

from pydantic_settings import BaseSettings

from blogapi.core.env_manager import EnvManager


class Settings(BaseSettings):
    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Blog Posts API")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "In-memory blog post CRUD service"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")

    API_PREFIX: str = EnvManager.get_env_variable("API_PREFIX", "/blog-posts")
    HOST: str = EnvManager.get_env_variable("HOST", "0.0.0.0")
    PORT: int = int(EnvManager.get_env_variable("PORT", "8080"))
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "info")

    SEED_SAMPLE_POSTS: bool = EnvManager.get_bool("SEED_SAMPLE_POSTS", True)
    CORS_ORIGINS: List[str] = ["*"]  # Adjust in production


settings = Settings()


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    """Set the package log level; handlers come from uvicorn or the test runner."""
    logging.getLogger("blogapi").setLevel(level.upper())

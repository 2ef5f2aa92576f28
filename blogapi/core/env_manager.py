import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class EnvManager:
    """Read configuration values from the environment (and `.env`)."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> Optional[str]:
        return os.environ.get(name, default)

    @staticmethod
    def get_bool(name: str, default: bool = False) -> bool:
        value = os.environ.get(name)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")

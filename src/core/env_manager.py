import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class EnvManager:
    """Read configuration values from the process environment."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        """Return the variable value, or the default when it is unset or blank."""
        value = os.getenv(name)
        if value is None or value.strip() == "":
            if default is None:
                raise KeyError(f"Environment variable '{name}' is not set")
            return default
        return value

    @staticmethod
    def get_bool(name: str, default: bool = False) -> bool:
        value = os.getenv(name)
        if value is None:
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")

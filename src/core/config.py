from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

from src.core.env_manager import EnvManager


class Settings(BaseSettings):
    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )
    SQL_ECHO: bool = EnvManager.get_bool("SQL_ECHO", False)

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Blog CMS")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Authors and posts content-management API"
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    TIME_ZONE: str = EnvManager.get_env_variable("TIME_ZONE", "UTC")
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")
    CORS_ORIGINS: str = EnvManager.get_env_variable("CORS_ORIGINS", "*")

    @property
    def cors_origins(self) -> list[str]:
        """CORS_ORIGINS as a list; accepts a comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def tz(self) -> ZoneInfo:
        return ZoneInfo(self.TIME_ZONE)

    def get_now(self):
        """Get the current time in the configured time zone."""
        return datetime.now(self.tz)


settings = Settings()

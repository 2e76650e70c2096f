# mockstore/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service metadata
    SERVICE_NAME: str = "mockstore-service"
    ENV: str = "local"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # All store routers are mounted below this prefix (/api/foodstore, /api/medstore)
    API_PREFIX: str = "/api"

    # Basic auth guard; off by default so test tools can hit the stores directly
    AUTH_ENABLED: bool = False
    USERS_FILE: Optional[str] = None  # JSON file shaped {"users": [...]}

    # Upper bound for the artificial processing delay of /order
    ORDER_MAX_DELAY_MS: int = 1000

    # Ceilings for the /basic load-test endpoints
    PERF_MAX_DELAY_MS: int = 30000
    PERF_MAX_PAYLOAD_ITEMS: int = 100000
    PERF_MAX_CPU_LOAD: int = 100

    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Optional

# Production front-ends that are always allowed under the strict origin policy
STATIC_ALLOWED_ORIGINS = [
    "https://yellow-parasol.com",
    "https://braces.fit",
    "http://localhost:8000",  # local front-end dev server
]

DEFAULT_DEV_ORIGIN = "http://localhost:8000"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # "STRICT_MODE=" in .env means unset
        env_ignore_empty=True,
    )

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Pushover credentials - the service still boots without them, sends fail
    pushover_user_key: Optional[str] = Field(default=None, alias="PUSHOVER_USER_KEY")
    pushover_api_token: Optional[str] = Field(default=None, alias="PUSHOVER_API_TOKEN")
    pushover_api_url: str = Field(
        default="https://api.pushover.net/1/messages.json",
        alias="PUSHOVER_API_URL",
    )
    pushover_timeout: float = Field(default=15.0, alias="PUSHOVER_TIMEOUT")

    # CORS settings
    allowed_origins: Optional[str] = Field(default=None, alias="ALLOWED_ORIGINS")
    strict_override: Optional[bool] = Field(default=None, alias="STRICT_MODE")

    # "server" (uvicorn) or "serverless" (Lambda)
    deployment_mode: str = Field(default="server", alias="DEPLOYMENT_MODE")

    @property
    def is_serverless(self) -> bool:
        return self.deployment_mode.strip().lower() == "serverless"

    @property
    def strict_mode(self) -> bool:
        """Strict validation and origin checks; follows the deployment mode unless STRICT_MODE is set"""
        if self.strict_override is not None:
            return self.strict_override
        return self.is_serverless

    @property
    def pushover_configured(self) -> bool:
        return bool(self.pushover_user_key and self.pushover_api_token)

    @property
    def configured_origins(self) -> List[str]:
        """Origins from ALLOWED_ORIGINS, trimmed and without a trailing slash"""
        if not self.allowed_origins:
            return []
        origins = []
        for origin in self.allowed_origins.split(","):
            origin = origin.strip()
            if origin.endswith("/"):
                origin = origin[:-1]
            if origin:
                origins.append(origin)
        return origins


@lru_cache
def get_settings():
    return Settings()

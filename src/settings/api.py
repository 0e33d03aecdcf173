"""API configuration settings.

FastAPI server and CORS settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 50 MB, same cap for JSON and URL-encoded bodies
_DEFAULT_MAX_BODY_SIZE = 50 * 1024 * 1024


class APISettings(BaseSettings):
    """FastAPI configuration.

    Attributes:
        host: API host address.
        port: API port.
        reload: Enable auto-reload in development.
        title: OpenAPI title, also served at the root endpoint.
        version: API version string.
        max_body_size: Largest accepted request body, in bytes.
    """

    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=3001, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")
    title: str = Field(default="Movie API Backend", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")
    max_body_size: int = Field(default=_DEFAULT_MAX_BODY_SIZE, gt=0, alias="API_MAX_BODY_SIZE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class CORSSettings(BaseSettings):
    """CORS configuration.

    Attributes:
        origins_raw: Comma-separated allowed origins, ``*`` for any.
    """

    origins_raw: str = Field(default="*", alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def origins(self) -> list[str]:
        """Parse origins from comma-separated string."""
        return [o.strip() for o in self.origins_raw.split(",") if o.strip()]

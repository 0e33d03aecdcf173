"""Database configuration settings.

MySQL connection and pool settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """MySQL database configuration.

    Attributes:
        host: Database host.
        port: Database port.
        database: Database name.
        user: Database user.
        password: Database password.
        url: Full connection URL (overrides individual settings).
        pool_size: Connections kept open in the pool.
        pool_overflow: Extra connections allowed above pool_size.
        pool_timeout: Seconds to wait for a free connection.
        query_timeout: Seconds a single read or write may take.
    """

    host: str = Field(default="localhost", alias="SQL_HOSTNAME")
    port: int = Field(default=3306, alias="SQL_PORT")
    database: str = Field(default="movies", alias="SQL_DBNAME")
    user: str = Field(default="root", alias="SQL_USERNAME")
    password: str = Field(default="", alias="SQL_PASSWORD")
    url: str | None = Field(default=None, alias="DATABASE_URL")

    # Pool settings
    pool_size: int = Field(default=5, alias="DB_POOL_SIZE")
    pool_overflow: int = Field(default=10, alias="DB_POOL_OVERFLOW")
    pool_timeout: int = Field(default=30, alias="DB_POOL_TIMEOUT")
    query_timeout: int = Field(default=30, gt=0, alias="DB_QUERY_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def sync_url(self) -> str:
        """Generate synchronous MySQL connection URL."""
        if self.url:
            return self.url
        return (
            f"mysql+pymysql://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )

    @property
    def connect_args(self) -> dict[str, int]:
        """Driver arguments bounding query execution time.

        Only PyMySQL understands these; other URLs get no extra arguments.
        """
        if not self.sync_url.startswith("mysql+pymysql"):
            return {}
        return {
            "connect_timeout": self.pool_timeout,
            "read_timeout": self.query_timeout,
            "write_timeout": self.query_timeout,
        }

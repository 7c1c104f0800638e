"""Application configuration via Pydantic Settings.

NOTE: Each setting is mapped to its environment variable name explicitly
(DATABASE_URL, PORT, ...) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database. Left empty on purpose: the service still boots without it,
    # but every data operation fails with StorageUnavailableError.
    database_url: str = Field(default="", validation_alias="DATABASE_URL")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=5005, validation_alias="PORT")
    cors_origins: list[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")

    # Name of the counter row that hands out Demo ids
    sequence_name: str = Field(default="productId", validation_alias="SEQUENCE_NAME")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()

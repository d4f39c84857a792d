from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Entropy backend for Fuid.new()
    # uuid4: uuid.uuid4() | secrets: secrets.token_bytes() stamped as version 4
    RANDOM_SOURCE: Literal["uuid4", "secrets"] = "uuid4"

    # Logging settings
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    # none: records only propagate to the host application's handlers
    # stderr | stdout: fuid prints its own records there and stops propagating
    LOG_HANDLER: Literal["none", "stderr", "stdout"] = "none"

    # Every setting is read from FUID_<NAME>, e.g. FUID_RANDOM_SOURCE=secrets.
    # A .env file is honoured when present; unrelated variables are ignored.
    model_config = {"env_prefix": "FUID_", "env_file": ".env", "extra": "ignore"}

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("LOG_HANDLER", mode="before")
    @classmethod
    def normalize_log_handler(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return settings

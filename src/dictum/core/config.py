import os
import typing as tp

from pydantic import BaseModel, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
ENV_PREFIX = "DICTUM_"


class Settings(BaseModel):
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{value}'. Expected one of {', '.join(LOG_LEVELS)}."
            )
        return level

    @classmethod
    def load(cls, environ: tp.Optional[tp.Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``DICTUM_*`` environment variables."""
        environ = os.environ if environ is None else environ

        overrides = {
            name: environ[ENV_PREFIX + name]
            for name in cls.model_fields
            if ENV_PREFIX + name in environ
        }
        return cls(**overrides)


settings = Settings.load()

"""Logging configuration models."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Configuration for logging behavior."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level installed by setup_logging",
    )

    rich_tracebacks: bool = Field(
        default=True,
        description="Render exception tracebacks with rich",
    )

    show_time: bool = Field(
        default=True,
        description="Prefix console log records with a timestamp",
    )

    suppress_modules: list[str] = Field(
        default=["asyncio", "urllib3"],
        description="External library modules to keep at WARNING and above",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("suppress_modules", mode="before")
    @classmethod
    def split_module_list(cls, v: Any) -> Any:
        """Accept a comma-separated string, as environment variables provide."""
        if isinstance(v, str):
            return [module.strip() for module in v.split(",") if module.strip()]
        return v

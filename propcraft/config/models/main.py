"""Main propcraft configuration model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .generation import GenerationConfig
from .logs import LoggingConfig


class PropCraftConfig(BaseModel):
    """Main configuration model for propcraft."""

    seed: int | None = Field(
        default=None,
        description="Seed for every sampling run; None draws a fresh seed per run",
    )

    generation: GenerationConfig = Field(
        default_factory=GenerationConfig,
        description="Size and depth budget for generation",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging behavior configuration",
    )

    def update_from_dict(self, updates: dict[str, Any]) -> "PropCraftConfig":
        """Return a copy with values from a dictionary deeply merged in."""
        current_dict = self.model_dump()
        updated_dict = _deep_merge(current_dict, updates)
        return PropCraftConfig(**updated_dict)

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


def _deep_merge(base: dict, updates: dict) -> dict:
    """Deeply merge updates into base dictionary."""
    result = base.copy()

    for key, value in updates.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result

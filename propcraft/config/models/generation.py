"""Generation budget configuration models."""

from pydantic import BaseModel, Field


class GenerationConfig(BaseModel):
    """Configuration for the size and depth budget handed to generators."""

    size: int = Field(
        default=100,
        ge=0,
        description="Size metric bounding the length and magnitude of generated values",
    )

    max_depth: int = Field(
        default=8,
        ge=0,
        le=256,
        description="Maximum recursion depth for self-referential generators",
    )

    sample_size: int = Field(
        default=100,
        ge=1,
        description="Number of values drawn per sampling run",
    )

"""Base DTO class."""

from pydantic import BaseModel, ConfigDict


class DTO(BaseModel):
    """Base class for application DTOs (immutable engine outputs and requests)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

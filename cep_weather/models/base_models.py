"""Shared response models."""

from pydantic import BaseModel, Field


class ErrorReport(BaseModel):
    """JSON error body returned to clients."""

    message: str = Field(min_length=1)

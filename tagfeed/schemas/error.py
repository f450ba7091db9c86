"""Error body schema shared by the exception handlers."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """JSON body returned for any failed request."""

    error: str = Field(..., description="Machine-readable error code, e.g. SEARCH_ERROR")
    message: str = Field(..., description="Human-readable explanation")
    details: dict[str, Any] = Field(default_factory=dict)

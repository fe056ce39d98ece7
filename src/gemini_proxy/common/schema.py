"""Pydantic models for the JSON envelope returned to callers."""
from __future__ import annotations
from typing import Any

from pydantic import BaseModel

METHOD_NOT_ALLOWED = "Method Not Allowed. Only POST requests are supported."
MISSING_PROMPT = 'Missing "prompt" in request body.'
GENERATION_FAILED = "Failed to generate AI insight."

class ProxyResponse(BaseModel):
    """Fixed-shape envelope; fields that do not apply are omitted on output."""
    success: bool
    text: str | None = None
    error: str | None = None
    details: str | None = None

    @classmethod
    def ok(cls, text: str) -> "ProxyResponse":
        return cls(success=True, text=text)

    @classmethod
    def fail(cls, error: str, details: str | None = None) -> "ProxyResponse":
        return cls(success=False, error=error, details=details)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)

"""Error Schemas — JSON body of 400/403/500 responses.

Invariants:
    - error is always True
    - code mirrors the HTTP status of the response
    - timestamp is ISO-8601 UTC
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ErrorBody(BaseModel):
    error: bool = True
    code: int
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so money fields, messages, and error payloads stay consistent.

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, PlainSerializer

# Balances and prices are stored as DECIMAL(12, 2) but travel as JSON numbers.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    error_code: str
    details: Any | None = None
    request_id: str
    timestamp: datetime

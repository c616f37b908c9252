from datetime import datetime
from typing import Dict

from pydantic import BaseModel

from rate_providers.models import Rate


class RateResponse(BaseModel):
    success: bool = True
    base: str
    date: str
    rates: Dict[str, Rate]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthCheck(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime

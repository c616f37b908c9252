from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

# Upstream rates are JSON numbers; numeric strings are rejected, ints stay ints.
Rate = Union[StrictInt, StrictFloat]


class RateSnapshot(BaseModel):
    """Latest rates for one base currency, as decoded from an upstream payload"""
    base: str
    date: str
    rates: Dict[str, Rate]


class LatestRatesPayload(BaseModel):
    """Partial decode of an open.er-api.com `latest` payload.

    Every field is optional; the provider decides which absences are fatal.
    Error payloads (`result == "error"`) are handled before decoding.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    base_code: Optional[str] = None
    time_last_update_utc: Optional[str] = None
    rates: Optional[Dict[str, Rate]] = None


class ConversionRatesPayload(LatestRatesPayload):
    """exchangerate-api.com v6 payload, which keeps its rates under `conversion_rates`"""
    rates: Optional[Dict[str, Rate]] = Field(default=None, alias="conversion_rates")

from abc import ABC, abstractmethod
import logging
from datetime import datetime, timezone
from typing import Any, Optional, Type

import requests
from pydantic import ValidationError

from .exceptions import (
    RateProviderException,
    InvalidRequest,
    ConfigurationError,
    UpstreamUnavailable,
    UpstreamError,
    UpstreamRejected,
    MalformedUpstreamResponse,
)
from .models import LatestRatesPayload, RateSnapshot

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class BaseRateProvider(ABC):
    """Base class for upstream exchange rate providers"""

    payload_model: Type[LatestRatesPayload] = LatestRatesPayload

    def __init__(self, api_key: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.timeout = timeout
        self.headers = {
            'Accept': 'application/json',
        }

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the name of the upstream provider"""
        pass

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Return the base URL of the provider's API"""
        pass

    @property
    def requires_api_key(self) -> bool:
        return False

    @abstractmethod
    def build_url(self, base_currency: str) -> str:
        """Return the latest-rates URL for a base currency"""
        pass

    def validate_base_currency(self, base_currency: Any) -> str:
        """Check the requested code is a 3-character string and normalize it"""
        if not base_currency or not isinstance(base_currency, str) or len(base_currency) != 3:
            logger.warning(f"Rejected invalid base currency code: {base_currency!r}")
            raise InvalidRequest("Invalid base currency code. Must be a 3-letter code (e.g., USD, EUR)")
        return base_currency.upper()

    def check_configuration(self) -> None:
        if self.requires_api_key and not self.api_key:
            logger.error(f"API key not configured for {self.provider_name}")
            raise ConfigurationError("Server configuration error: API key not set")

    def redact(self, message: str) -> str:
        """Strip the API key from text that may echo the request URL"""
        if self.api_key:
            return message.replace(self.api_key, "***")
        return message

    def fetch_data(self, base_currency: str) -> Any:
        """Fetch the raw JSON payload for a base currency"""
        try:
            response = requests.get(
                self.build_url(base_currency),
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            reason = self.redact(str(e))
            logger.error(f"Failed to reach {self.provider_name} for {base_currency}: {reason}")
            raise UpstreamUnavailable(f"Internal server error: {reason}")

        if not response.ok:
            logger.error(
                f"{self.provider_name} API error for {base_currency}: "
                f"{response.status_code} - {self.redact(response.text)}"
            )
            raise UpstreamError(response.status_code, response.reason)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{self.provider_name} returned a non-JSON body for {base_currency}: {e}")
            raise MalformedUpstreamResponse("Invalid response from exchange rate API")

    def parse_rates(self, payload: Any, base_currency: str) -> RateSnapshot:
        """Decode the upstream payload into a rate snapshot"""
        if not isinstance(payload, dict):
            logger.error(f"Invalid {self.provider_name} response: expected an object, got {type(payload).__name__}")
            raise MalformedUpstreamResponse("Invalid response from exchange rate API")

        if payload.get('result') == 'error':
            error_type = payload.get('error-type')
            logger.error(f"{self.provider_name} returned error: {error_type!r}")
            if not isinstance(error_type, str) or not error_type:
                error_type = 'Unknown API error'
            raise UpstreamRejected(error_type)

        try:
            decoded = self.payload_model.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Invalid {self.provider_name} response for {base_currency}: {e}")
            raise MalformedUpstreamResponse("Invalid response from exchange rate API")

        if decoded.rates is None:
            logger.error(f"Invalid {self.provider_name} response: rates not found")
            raise MalformedUpstreamResponse("Invalid response from exchange rate API")

        return RateSnapshot(
            base=decoded.base_code or base_currency,
            date=decoded.time_last_update_utc or datetime.now(timezone.utc).isoformat(),
            rates=decoded.rates,
        )

    def get_latest_rates(self, base_currency: Any) -> RateSnapshot:
        """Main method to fetch the latest rates for a base currency"""
        code = self.validate_base_currency(base_currency)
        try:
            self.check_configuration()
            payload = self.fetch_data(code)
            snapshot = self.parse_rates(payload, base_currency)

            logger.info(f"Fetched {len(snapshot.rates)} rates for {code} from {self.provider_name}")
            return snapshot

        except RateProviderException as e:
            logger.error(f"Rate lookup failed for {code} via {self.provider_name}: {e}")
            raise
        except Exception as e:
            reason = self.redact(str(e))
            logger.error(f"Unexpected error for {code} via {self.provider_name}: {reason}")
            raise RateProviderException(f"Internal server error: {reason}")


from typing import Dict, Optional, Type

from .base import BaseRateProvider, DEFAULT_TIMEOUT
from .exceptions import (
    RateProviderException,
    InvalidRequest,
    ConfigurationError,
    UpstreamUnavailable,
    UpstreamError,
    UpstreamRejected,
    MalformedUpstreamResponse,
)
from .exchangerate_api import ExchangeRateApiProvider
from .models import RateSnapshot
from .open_er_api import OpenErApiProvider

PROVIDERS: Dict[str, Type[BaseRateProvider]] = {
    'open-er-api': OpenErApiProvider,
    'exchangerate-api': ExchangeRateApiProvider,
}


def get_provider(name: str, api_key: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> BaseRateProvider:
    """Instantiate a registered provider by name"""
    try:
        provider_cls = PROVIDERS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown rate provider '{name}'. Expected one of: {', '.join(sorted(PROVIDERS))}"
        )
    return provider_cls(api_key=api_key, timeout=timeout)


__all__ = [
    'BaseRateProvider',
    'OpenErApiProvider',
    'ExchangeRateApiProvider',
    'RateSnapshot',
    'RateProviderException',
    'InvalidRequest',
    'ConfigurationError',
    'UpstreamUnavailable',
    'UpstreamError',
    'UpstreamRejected',
    'MalformedUpstreamResponse',
    'PROVIDERS',
    'get_provider',
]

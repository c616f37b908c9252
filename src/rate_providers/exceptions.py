class RateProviderException(Exception):
    """Base exception for rate provider errors"""
    status_code = 500


class InvalidRequest(RateProviderException):
    """Raised when the requested base currency code is not usable"""
    status_code = 400


class ConfigurationError(RateProviderException):
    """Raised when the provider is missing required configuration"""
    status_code = 500


class UpstreamUnavailable(RateProviderException):
    """Raised when the upstream provider cannot be reached"""
    status_code = 500


class UpstreamError(RateProviderException):
    """Raised when the upstream provider answers with a non-success status"""

    def __init__(self, status_code: int, reason: str):
        super().__init__(f"Failed to fetch exchange rates: {reason}")
        self.status_code = status_code
        self.reason = reason


class UpstreamRejected(RateProviderException):
    """Raised when the upstream payload reports an application-level error"""
    status_code = 400


class MalformedUpstreamResponse(RateProviderException):
    """Raised when the upstream payload cannot be decoded into rates"""
    status_code = 500

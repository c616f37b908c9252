from .base import BaseRateProvider
from .models import ConversionRatesPayload


class ExchangeRateApiProvider(BaseRateProvider):
    """exchangerate-api.com v6 endpoint; the key is part of the URL path"""

    payload_model = ConversionRatesPayload

    @property
    def provider_name(self) -> str:
        return "exchangerate-api.com"

    @property
    def base_url(self) -> str:
        return "https://v6.exchangerate-api.com/v6"

    @property
    def requires_api_key(self) -> bool:
        return True

    def build_url(self, base_currency: str) -> str:
        return f"{self.base_url}/{self.api_key}/latest/{base_currency}"

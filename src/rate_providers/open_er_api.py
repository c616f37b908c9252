from .base import BaseRateProvider
from .models import LatestRatesPayload


class OpenErApiProvider(BaseRateProvider):
    """open.er-api.com public endpoint, no API key required"""

    payload_model = LatestRatesPayload

    @property
    def provider_name(self) -> str:
        return "open.er-api.com"

    @property
    def base_url(self) -> str:
        return "https://open.er-api.com/v6"

    def build_url(self, base_currency: str) -> str:
        return f"{self.base_url}/latest/{base_currency}"

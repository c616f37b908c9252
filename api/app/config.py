import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

STATIC_DIR = Path(__file__).resolve().parent / "static"

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, loaded once at startup"""
    port: int = 3000
    host: str = "0.0.0.0"
    exchange_rate_api_key: Optional[str] = None
    rate_provider: str = "open-er-api"
    upstream_timeout: float = 10.0
    cors_origins: Tuple[str, ...] = ("*",)
    static_dir: str = str(STATIC_DIR)
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.exchange_rate_api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        origins = tuple(o.strip() for o in env.get("CORS_ORIGINS", "*").split(",") if o.strip())
        return cls(
            port=int(env.get("PORT", "3000")),
            host=env.get("HOST", "0.0.0.0"),
            exchange_rate_api_key=env.get("EXCHANGE_RATE_API_KEY") or None,
            rate_provider=env.get("RATE_PROVIDER", "open-er-api"),
            upstream_timeout=float(env.get("UPSTREAM_TIMEOUT_SECONDS", "10")),
            cors_origins=origins or ("*",),
            static_dir=env.get("STATIC_DIR", str(STATIC_DIR)),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


def load_settings() -> Settings:
    # Load environment variables from a .env file for local development.
    load_dotenv()
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)

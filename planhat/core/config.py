"""Client configuration from explicit values or the environment."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError
from .ratelimit import DEFAULT_BURST, DEFAULT_RATE

logger = logging.getLogger(__name__)

API_KEY_ENV = "PLANHAT_API_KEY"
REGION_ENV = "PLANHAT_REGION"
TENANT_UUID_ENV = "PLANHAT_TENANT_UUID"

METRICS_URL = "https://analytics.planhat.com/dimensiondata"
DEFAULT_TIMEOUT_SECONDS = 10.0


def base_url_for_region(region: str | None) -> str:
    """
    Build the API base URL for a Planhat region.

    An empty region maps to the bare ``api`` host; ``eu3`` maps to
    ``api-eu3`` and so on.

    Args:
        region: Cluster suffix such as "eu", "eu2", "eu3" or "us2"

    Returns:
        Base URL without a trailing slash
    """
    host = f"api-{region}" if region else "api"
    return f"https://{host}.planhat.com"


@dataclass
class ClientConfig:
    """Settings needed to build a Client."""
    api_key: str
    region: str = ""
    tenant_uuid: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    rate: float = DEFAULT_RATE
    burst: int = DEFAULT_BURST

    @property
    def base_url(self) -> str:
        return base_url_for_region(self.region)


def load_config(environ: Mapping[str, str] | None = None) -> ClientConfig:
    """
    Load client settings from environment variables.

    Reads PLANHAT_API_KEY (required), PLANHAT_REGION and
    PLANHAT_TENANT_UUID.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        The loaded ClientConfig

    Raises:
        ConfigError: If the API key is missing or empty
    """
    if environ is None:
        environ = os.environ

    api_key = environ.get(API_KEY_ENV, "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_ENV} is not set")

    region = environ.get(REGION_ENV, "").strip()
    tenant_uuid = environ.get(TENANT_UUID_ENV, "").strip() or None

    logger.debug(f"Loaded Planhat config from environment (region={region or 'default'})")
    return ClientConfig(api_key=api_key, region=region, tenant_uuid=tenant_uuid)

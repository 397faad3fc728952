import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

BASE_URL = "https://api.nexus.dev/v1"
PLACEHOLDER_API_KEY = "demo_key"
DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientConfig:
    api_key: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT


def load_config(api_key=None, base_url=None, timeout=None) -> ClientConfig:
    """
    Build a ClientConfig from arguments, falling back to the environment
    (NEXUS_API_KEY, NEXUS_API_BASE_URL, NEXUS_API_TIMEOUT) and a local .env file.
    """
    load_dotenv()

    if api_key is None:
        api_key = os.getenv("NEXUS_API_KEY")
    if not api_key:
        logger.warning("NEXUS_API_KEY is not set, using placeholder credential")
        api_key = PLACEHOLDER_API_KEY

    base_url = base_url or os.getenv("NEXUS_API_BASE_URL") or BASE_URL

    if timeout is None:
        raw = os.getenv("NEXUS_API_TIMEOUT")
        if raw:
            try:
                timeout = float(raw)
            except ValueError:
                raise ConfigError(f"NEXUS_API_TIMEOUT must be a number, got {raw!r}")
        else:
            timeout = DEFAULT_TIMEOUT

    return ClientConfig(api_key=api_key, base_url=base_url.rstrip("/"), timeout=timeout)

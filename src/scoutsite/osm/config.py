from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ErrorKind, OSMApiError

DEFAULT_BASE_URL = "https://www.onlinescoutmanager.co.uk"
DEFAULT_TIMEOUT_SEC = 15.0
DEFAULT_MOCK_DELAY_SEC = 0.1


@dataclass(frozen=True)
class OSMConfig:
    """
    Connection settings for one OSM client.

    ``use_mock_data`` selects the offline double; credentials are then
    optional.
    """

    api_id: str = ""
    api_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    use_mock_data: bool = False
    timeout: float = DEFAULT_TIMEOUT_SEC
    mock_delay: float = DEFAULT_MOCK_DELAY_SEC

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_id) and bool(self.api_token)


def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> OSMConfig:
    """
    Build an OSMConfig from environment variables.

    Variables:
        OSM_API_ID, OSM_API_TOKEN  - credentials
        OSM_BASE_URL               - override the production host
        USE_MOCK_DATA              - "true" selects the offline double
        OSM_TIMEOUT_SEC            - request timeout (default: 15)

    Pass ``environ`` to read from a mapping other than os.environ.
    """
    env = os.environ if environ is None else environ

    timeout_raw = (env.get("OSM_TIMEOUT_SEC") or str(DEFAULT_TIMEOUT_SEC)).strip()
    try:
        timeout = float(timeout_raw)
    except ValueError as e:
        raise OSMApiError(
            f"OSM_TIMEOUT_SEC must be a number, got '{timeout_raw}'.",
            kind=ErrorKind.CONFIGURATION,
        ) from e

    return OSMConfig(
        api_id=(env.get("OSM_API_ID") or "").strip(),
        api_token=(env.get("OSM_API_TOKEN") or "").strip(),
        base_url=(env.get("OSM_BASE_URL") or DEFAULT_BASE_URL).strip(),
        use_mock_data=(env.get("USE_MOCK_DATA") or "").strip().lower() == "true",
        timeout=timeout,
    )

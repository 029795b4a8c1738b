from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from .client import OSMClient
from .config import OSMConfig, load_config_from_env
from .errors import ErrorKind, OSMApiError
from .mock_client import MockOSMClient


logger = logging.getLogger(__name__)

AnyOSMClient = Union[OSMClient, MockOSMClient]


def create_client(config: Optional[OSMConfig] = None) -> AnyOSMClient:
    """
    Return the live client, or the offline double when
    ``config.use_mock_data`` is set.

    The mock flag always wins. Without it, both credentials are required.

    Raises:
        OSMApiError: kind CONFIGURATION when live credentials are missing.
    """
    if config is not None and config.use_mock_data:
        logger.info("Using mock OSM API data")
        return MockOSMClient(delay=config.mock_delay)

    if config is None or not config.has_credentials:
        raise OSMApiError(
            "Missing OSM API credentials. Please set OSM_API_ID and OSM_API_TOKEN, "
            "or set USE_MOCK_DATA=true to use mock data.",
            kind=ErrorKind.CONFIGURATION,
        )

    logger.info(f"Using live OSM API at {config.base_url}")
    return OSMClient.from_config(config)


def create_client_from_env(environ: Optional[Mapping[str, str]] = None) -> AnyOSMClient:
    """Build a client from OSM_* / USE_MOCK_DATA environment variables."""
    return create_client(load_config_from_env(environ))

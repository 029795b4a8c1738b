from __future__ import annotations

import logging
from collections import abc
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Type, TypeVar, Union
from urllib.parse import quote, quote_plus, urlencode

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SEC
from .decoder import decode_body
from .errors import ErrorKind, OSMApiError
from .rate_limit import RateLimitInfo


logger = logging.getLogger(__name__)

ParamValue = Union[str, int, float, bool]
Params = Union[Mapping[str, ParamValue], Sequence[Tuple[str, ParamValue]]]

ModelT = TypeVar("ModelT", bound=BaseModel)

RATE_LIMIT_MESSAGE = "Rate limit exceeded"


def _render_param(value: ParamValue) -> str:
    # OSM expects lowercase booleans, as a browser would send them
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class BaseOSMClient:
    """
    Authenticated request executor for the OSM API.

    Features:
    - Persistent session with default headers
    - apiid/token appended to every request
    - Rate-limit snapshot captured from every response
    - Uniform OSMApiError for every failure
    - One attempt per call unless ``retries`` is raised explicitly
    """

    DEFAULT_RETRIES = 0
    DEFAULT_BACKOFF_FACTOR = 0.5

    def __init__(
        self,
        api_id: str,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        retries: Optional[int] = None,
        backoff_factor: Optional[float] = None,
    ) -> None:
        if not api_id or not api_token:
            raise OSMApiError(
                "Missing OSM API credentials. Both api_id and api_token are required.",
                kind=ErrorKind.CONFIGURATION,
            )

        self.api_id = api_id
        self.api_token = api_token
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout or DEFAULT_TIMEOUT_SEC
        self._rate_limit_info: Optional[RateLimitInfo] = None

        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "ScoutSite/1.0",
                "Accept": "application/json",
            }
        )

        retry_strategy = Retry(
            total=retries if retries is not None else self.DEFAULT_RETRIES,
            backoff_factor=backoff_factor if backoff_factor is not None else self.DEFAULT_BACKOFF_FACTOR,
            allowed_methods=["GET"],
            raise_on_status=False,
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    # ---------------------------------------------------
    # Session lifecycle
    # ---------------------------------------------------
    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BaseOSMClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ---------------------------------------------------
    # Rate limiting
    # ---------------------------------------------------
    def get_rate_limit_info(self) -> Optional[RateLimitInfo]:
        """Rate-limit headers from the last response, or None before any request."""
        return self._rate_limit_info

    # ---------------------------------------------------
    # Core request method
    # ---------------------------------------------------
    def build_url(self, endpoint: str, params: Optional[Params] = None) -> str:
        """
        Build the full request URL.

        Query order is fixed: anything already on ``endpoint`` (e.g.
        ``?action=getData``), then apiid, token, then caller parameters in
        the order given.
        """
        items = list(params.items()) if isinstance(params, abc.Mapping) else list(params or [])
        query = urlencode(
            [("apiid", self.api_id), ("token", self.api_token)]
            + [(key, _render_param(value)) for key, value in items]
        )
        separator = "&" if "?" in endpoint else "?"
        return f"{self.base_url}/{endpoint.lstrip('/')}{separator}{query}"

    def request(
        self,
        endpoint: str,
        params: Optional[Params] = None,
        response_model: Optional[Type[ModelT]] = None,
    ) -> Any:
        """
        Send one GET request and return the decoded body.

        When ``response_model`` is given the decoded body is validated into
        that pydantic model.

        Raises:
            OSMApiError: for transport, rate-limit, HTTP and decode failures.
        """
        url = self.build_url(endpoint, params)
        logger.debug(f"OSM GET {endpoint}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"OSM request to {endpoint} failed: {type(e).__name__}")
            message = self._redact(str(e) or type(e).__name__)
            raise OSMApiError(message, kind=ErrorKind.TRANSPORT) from e

        # Overwrite, never merge: only the latest response's limiter state counts
        self._rate_limit_info = RateLimitInfo.from_headers(response.headers)

        if response.status_code == 429:
            logger.warning(
                f"OSM rate limit exceeded on {endpoint} "
                f"(reset={self._rate_limit_info.reset or 'unknown'})"
            )
            raise OSMApiError(
                RATE_LIMIT_MESSAGE,
                kind=ErrorKind.RATE_LIMITED,
                status=429,
                rate_limit=self._rate_limit_info,
            )

        if not 200 <= response.status_code < 300:
            reason = response.reason or str(response.status_code)
            logger.warning(f"OSM request to {endpoint} returned HTTP {response.status_code}")
            raise OSMApiError(
                f"API request failed: {reason}",
                kind=ErrorKind.HTTP,
                status=response.status_code,
            )

        data = decode_body(endpoint, response.text)
        if response_model is None:
            return data

        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise OSMApiError(
                f"Unexpected response shape from {endpoint}: {e.error_count()} validation error(s)",
                kind=ErrorKind.DECODE,
            ) from e

    def _redact(self, text: str) -> str:
        # urllib3 messages embed the request URL, raw or percent-encoded
        for form in (quote_plus(self.api_token), quote(self.api_token, safe=""), self.api_token):
            text = text.replace(form, "***")
        return text

    @staticmethod
    def _query(params: Optional[BaseModel]) -> Dict[str, ParamValue]:
        """Flatten a parameter bundle, dropping unset optional fields."""
        if params is None:
            return {}
        return params.model_dump(exclude_none=True)

"""
Request execution for the rulesets client.

RulesetsClient never talks HTTP itself; it hands method, path and body to a
RequestExecutor. HTTPTransport is the default executor built on requests.
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol, Tuple, Union

import requests
from pydantic import BaseModel, Field
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from . import __version__
from .config import APIConfig

logger = logging.getLogger("cf_rulesets")


class RequestContext(BaseModel):
    """Per-call options a caller hands through the client to the executor."""
    timeout: Optional[Union[float, Tuple[float, float]]] = None
    headers: Dict[str, str] = Field(default_factory=dict)


class RequestExecutor(Protocol):
    """Anything able to perform one request and return the raw response body."""

    def execute(
        self,
        context: Any,
        method: str,
        path: str,
        body: Optional[Any] = None,
    ) -> bytes:
        ...


class HTTPTransport:
    """Request executor backed by a requests session."""

    def __init__(self, config: APIConfig, session: Optional[requests.Session] = None):
        """Initialize the session with retries and authentication headers."""
        self.config = config
        self.base_url = config.api_url.rstrip("/")

        retry_strategy = Retry(
            total=config.max_retries,
            backoff_factor=config.backoff_factor,
            status_forcelist=[429, 500, 502, 503, 504],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)

        self.session = session or requests.Session()
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Authorization": f"Bearer {config.api_token}",
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": f"cf-rulesets/{__version__}"
        })

    def execute(
        self,
        context: Optional[RequestContext],
        method: str,
        path: str,
        body: Optional[Any] = None,
    ) -> bytes:
        """
        Perform a request and return the response body.

        Args:
            context: Optional per-call timeout and extra headers
            method: HTTP method
            path: Path relative to the API base URL
            body: JSON-ready request body, if any

        Returns:
            Raw response bytes

        Raises:
            requests.exceptions.RequestException: on connection failures and
                non-2xx responses
        """
        url = f"{self.base_url}{path}"
        timeout = self.config.timeout
        headers = {}
        if context is not None:
            if context.timeout is not None:
                timeout = context.timeout
            headers.update(context.headers)

        data = json.dumps(body) if body is not None else None

        logger.debug(f"{method} {url}")
        response = self.session.request(
            method,
            url,
            data=data,
            headers=headers or None,
            timeout=timeout,
        )
        response.raise_for_status()
        logger.debug(f"{method} {url} -> {response.status_code} ({len(response.content)} bytes)")
        return response.content

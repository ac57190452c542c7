"""HTTP transport shared by all resource clients."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import httpx

from .config import Config
from .errors import check_response


class Transport:
    """Sends authenticated JSON requests to the REST API.

    The configuration is resolved (environment and defaults applied) and
    validated on construction. When no ``http_client`` is given, one is
    created and owned by the transport, and closed by :meth:`close`.
    """

    def __init__(
        self, config: Config, http_client: Optional[httpx.Client] = None
    ) -> None:
        resolved = config.resolve()
        resolved.validate()
        self.config = resolved
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                timeout=resolved.http_timeout,
                verify=not resolved.insecure_skip_verify,
            )
        self.http_client = http_client

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body, or None if empty.

        Query parameters whose value is None are left out. A status of 400 or
        above raises the matching :class:`~arizeclient.errors.APIError`.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        headers = dict(self.config.headers())
        content = None
        if body is not None:
            content = json.dumps(body).encode("utf-8")
            headers["content-type"] = "application/json"
        response = self.http_client.request(
            method,
            self.config.api_url() + path,
            params=query,
            content=content,
            headers=headers,
            timeout=self.config.http_timeout,
        )
        check_response(response.status_code, response.content)
        if not response.content.strip():
            return None
        return response.json()

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
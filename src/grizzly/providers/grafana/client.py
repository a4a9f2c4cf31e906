"""HTTP wrapper for Grafana-style JSON APIs."""

from __future__ import annotations

import logging
from typing import Any

import requests

from grizzly.core.errors import NotFoundError, ProviderError

logger = logging.getLogger(__name__)


class GrafanaClient:
    """Thin wrapper around a ``requests`` session bound to one base URL.

    404 responses raise NotFoundError; any other failure raises ProviderError.
    No retries are attempted.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        user: str | None = None,
        timeout: float = 30,
        headers: dict[str, str] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.user = user
        self.timeout = timeout
        self.headers = headers or {}
        self._session: requests.Session | None = None

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            session = requests.Session()
            session.headers.update(self.headers)
            if self.user and self.token:
                session.auth = (self.user, self.token)
            elif self.token:
                session.headers["Authorization"] = f"Bearer {self.token}"
            self._session = session
        return self._session

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        if not self.base_url:
            raise ProviderError(f"No base URL configured for {method} {path}")
        url = self.url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"{method} {url} failed: {e}") from e

        if response.status_code == 404:
            raise NotFoundError(f"{method} {url}: not found")
        if not response.ok:
            raise ProviderError(
                f"{method} {url} returned {response.status_code}: {response.text.strip()}"
            )
        return response

    def get_json(self, path: str) -> Any:
        return self.request("GET", path).json()

    def post_json(self, path: str, payload: Any) -> Any:
        response = self.request("POST", path, json=payload)
        return response.json() if response.content else None

    def put_json(self, path: str, payload: Any) -> Any:
        response = self.request("PUT", path, json=payload)
        return response.json() if response.content else None

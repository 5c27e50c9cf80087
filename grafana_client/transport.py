"""HTTP transport shared by all Grafana API calls."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

import requests

from .errors import GrafanaAPIError


@dataclass
class Config:
    """Connection settings: an API key and an optional requests session."""

    api_key: str = ""
    session: requests.Session | None = None


class Transport:
    """Sends JSON requests to a Grafana server and decodes the answers."""

    def __init__(self, base_url: str, config: Config | None = None) -> None:
        parsed = urlsplit(base_url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"invalid Grafana URL: {base_url!r}")
        self.base_url = base_url.rstrip("/")
        self.config = config or Config()
        self.session = self.config.session or requests.Session()

    def request(
        self,
        method: str,
        path: str,
        query: Any = None,
        body: Any = None,
    ) -> Any:
        """Send a request; return the decoded JSON answer, or None if it is empty.

        Raises GrafanaAPIError when the server answers with a status of 400 or above.
        """
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        data = None if body is None else json.dumps(body)
        response = self.session.request(
            method,
            self.base_url + path,
            params=query,
            data=data,
            headers=headers,
        )
        text = response.text
        if response.status_code >= 400:
            raise GrafanaAPIError(response.status_code, text)
        if not text.strip():
            return None
        return json.loads(text)
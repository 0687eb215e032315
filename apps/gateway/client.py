"""HTTP client for the ShareIt core service."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests
from django.conf import settings  # type: ignore

logger = logging.getLogger(__name__)


class GatewayTransportError(Exception):
    """The core service could not be reached or did not answer in time."""


class ShareItClient:
    """Thin wrapper over a ``requests.Session`` pointed at the core service.

    Any HTTP status, 4xx and 5xx included, is returned to the caller as a
    response; only transport failures raise.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or settings.SHAREIT_SERVER_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.SHAREIT_GATEWAY_TIMEOUT
        self.session = session or requests.Session()
        self.user_header = getattr(settings, "SHAREIT_USER_HEADER", "X-Sharer-User-Id")

    def forward(
        self,
        method: str,
        path: str,
        *,
        user_id: Optional[int] = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> requests.Response:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if user_id is not None:
            headers[self.user_header] = str(user_id)
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                params=params or None,
                json=json,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Core service call %s %s failed: %s", method, path, e)
            raise GatewayTransportError(str(e)) from e
        if response.status_code >= 400:
            logger.info("Core service answered %s %s with %s", method, path, response.status_code)
        return response


def get_client() -> ShareItClient:
    return ShareItClient()

"""
Client for the engagement service.

The engagement service owns outbound messaging campaigns and has to be told
when customers are merged so that its messages follow the new customer id.
"""
import logging
from typing import Any, Dict, List, Optional

import httpx
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from crm.errors import EngagesAPIError

logger = logging.getLogger(__name__)


class EngagesAPI:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url if base_url is not None else settings.ENGAGES_API_DOMAIN).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.ENGAGES_API_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        if not self.base_url:
            raise ImproperlyConfigured("ENGAGES_API_DOMAIN is not set")

        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )

        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "EngagesAPI":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        logger.debug("Engages API %s %s", method, path)

        try:
            response = self.client.request(method, path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("Engages API %s %s returned %s", method, path, e.response.status_code)
            raise EngagesAPIError(path, f"status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("Engages API %s %s failed: %s", method, path, e)
            raise EngagesAPIError(path, str(e) or e.__class__.__name__) from e

        if not response.content:
            return None

        return response.json()

    def list(self) -> Any:
        return self._request("GET", "/engages/list")

    def send(self, params: Dict[str, Any]) -> Any:
        return self._request("POST", "/engages/send", json={**params})

    def engages_change_customer(self, new_customer_id: str, customer_ids: List[str]) -> Any:
        return self._request(
            "POST",
            "/engages/changeCustomer",
            json={"customerId": new_customer_id, "customerIds": list(customer_ids)},
        )


class DataSources:
    """External services available to resolvers through ``info.context``."""

    def __init__(self, engages: Optional[EngagesAPI] = None):
        self.engages = engages or EngagesAPI()

    def close(self) -> None:
        self.engages.close()

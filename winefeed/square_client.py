import logging
from typing import Any, Optional

import requests

from .settings import FeedConfig

logger = logging.getLogger(__name__)


class SquareAPIError(Exception):
    """A non-success response from the Square API. Carries the raw body verbatim."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Square API {status_code}: {body}")


class SquareClient:
    """Thin authenticated wrapper around the Square REST API."""

    def __init__(self, config: FeedConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.access_token}",
            "Square-Version": self.config.square_version,
            "Content-Type": "application/json",
        }

    def call(self, path: str, body: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        GET `path` when no body is given, otherwise POST the body as JSON.
        Raises SquareAPIError on any non-2xx status.
        """
        url = f"{self.config.base_url}{path}"
        method = "POST" if body is not None else "GET"
        logger.debug(f"{method} {url}")

        response = self.session.request(
            method,
            url,
            headers=self._headers(),
            json=body,
            timeout=self.config.timeout,
        )

        if not 200 <= response.status_code < 300:
            raise SquareAPIError(response.status_code, response.text)
        return response.json()

    def search_item_variations(self) -> dict[str, Any]:
        """One page of item variations plus their related ITEM objects."""
        data = self.call(
            "/v2/catalog/search",
            {
                "object_types": ["ITEM_VARIATION"],
                "include_related_objects": True,
                "limit": self.config.page_limit,
            },
        )
        if data.get("cursor"):
            logger.warning(
                f"⚠️ Catalog has more than {self.config.page_limit} variations. "
                "Only the first page is exported."
            )
        return data

    def batch_retrieve_counts(self, variation_ids: list[str], location_id: str) -> dict[str, Any]:
        """In-stock counts for the given variations at a single location."""
        return self.call(
            "/v2/inventory/batch-retrieve-counts",
            {
                "catalog_object_ids": variation_ids,
                "location_ids": [location_id],
                "states": ["IN_STOCK"],
            },
        )

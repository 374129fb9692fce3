"""
Unsplash passthrough used by the image tools.

The remote responses are reshaped into the small records the orchestration
platform expects; nothing else is computed here.
"""

import logging
from typing import Any

import requests

from config import config
from services.cache import CacheClient

logger = logging.getLogger(__name__)

FALLBACK_DESCRIPTION = "Unsplash Image"


class ImageSearchError(Exception):
    """Image lookup failed; status_code is the HTTP status the route should answer with."""
    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: requests.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    errors = body.get("errors") if isinstance(body, dict) else None
    return ", ".join(errors) if errors else default


def to_search_result(img: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": img["id"],
        "url": img["urls"]["regular"],
        "photographer": img["user"]["name"],
        "description": img.get("alt_description"),
    }


def to_random_result(img: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": img["id"],
        "thumbUrl": img["urls"]["thumb"],
        "previewUrl": img["urls"]["small"],
        "fullUrl": img["urls"]["regular"],
        "photographer": img["user"]["name"],
        "photographerProfile": img["user"]["links"]["html"],
        "description": img.get("alt_description") or FALLBACK_DESCRIPTION,
    }


class UnsplashClient:
    """Thin wrapper around the Unsplash REST API."""

    def __init__(self, access_key: str, base_url: str = "https://api.unsplash.com",
                 timeout: float = 10.0, session: requests.Session | None = None):
        self.access_key = access_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params: dict[str, Any], default_error: str) -> Any:
        if not self.access_key:
            raise ImageSearchError("UNSPLASH_ACCESS_KEY is not configured.", status_code=503)

        try:
            response = self.session.get(
                f"{self.base_url}{path}",
                params=params,
                headers={"Authorization": f"Client-ID {self.access_key}"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Error calling Unsplash %s: %s", path, e)
            raise ImageSearchError(f"{default_error}: {e}") from e

        if not response.ok:
            message = _error_message(response, default_error)
            logger.error("Unsplash %s returned %d: %s", path, response.status_code, message)
            raise ImageSearchError(message)

        return response.json()

    def search(self, query: str, per_page: int = 5) -> list[dict[str, Any]]:
        if not query:
            raise ImageSearchError("Query parameter is required", status_code=400)

        data = self._get(
            "/search/photos",
            {"query": query, "per_page": per_page, "orientation": "landscape"},
            "Error fetching images",
        )
        return [to_search_result(img) for img in data.get("results", [])]

    def random(self, query: str, count: int = 5) -> list[dict[str, Any]]:
        if not query:
            raise ImageSearchError("Query parameter is required", status_code=400)

        data = self._get(
            "/photos/random",
            {"query": query, "count": count, "orientation": "landscape"},
            "Error fetching random images",
        )
        # A single object comes back when count is omitted upstream
        results = data if isinstance(data, list) else [data]
        return [to_random_result(img) for img in results]


def search_images(client: UnsplashClient, cache: CacheClient, query: str, per_page: int = 5) -> list[dict[str, Any]]:
    """Search with a read-through cache. Random images are never cached."""
    cached = cache.get_search(query, per_page)
    if cached is not None:
        logger.debug("search_images '%s' cache hit", query)
        return cached

    images = client.search(query, per_page)
    cache.set_search(query, per_page, images)
    logger.info("search_images '%s' returned %d images", query, len(images))
    return images


_DEFAULT_IMAGE_CLIENT = UnsplashClient(
    access_key=config.unsplash_access_key,
    base_url=config.unsplash_api_url,
    timeout=config.unsplash_timeout,
)

def get_image_client():
    return _DEFAULT_IMAGE_CLIENT

"""
Sources of content type schemas: local JSON files and the Delivery API.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from .exceptions import SchemaSourceError
from .models import ContentTypeSchema

logger = logging.getLogger(__name__)

DEFAULT_DELIVERY_URL = "https://deliver.kontent.ai"


def parse_content_types(data: Any) -> list[ContentTypeSchema]:
    """Parse a ``/types`` response (``{"types": [...]}``) or a bare list of types."""
    if isinstance(data, dict):
        data = data.get("types")
    if not isinstance(data, list):
        raise SchemaSourceError("Expected a list of content types or an object with a 'types' list")
    try:
        return [ContentTypeSchema.from_dict(t) for t in data]
    except (KeyError, TypeError, AttributeError) as e:
        raise SchemaSourceError(f"Malformed content type: {e}") from e


def load_content_types(path: str | Path) -> list[ContentTypeSchema]:
    """
    Load content types from a JSON file.

    Args:
        path: File holding a saved ``/types`` response or a list of types

    Returns:
        Content types in file order

    Raises:
        SchemaSourceError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SchemaSourceError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaSourceError(f"Invalid JSON in {path}: {e}") from e

    types = parse_content_types(data)
    logger.info("Loaded %d content type(s) from %s", len(types), path)
    return types


class DeliveryClient:
    """Minimal Delivery API client for listing content types."""

    def __init__(
        self,
        project_id: str,
        secure_access_key: str | None = None,
        base_url: str = DEFAULT_DELIVERY_URL,
        timeout: int = 30,
        session: requests.Session | None = None,
    ):
        self.project_id = project_id
        self.secure_access_key = secure_access_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def types_url(self) -> str:
        return f"{self.base_url}/{self.project_id}/types"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.secure_access_key:
            headers["Authorization"] = f"Bearer {self.secure_access_key}"
        return headers

    def _get(self, url: str) -> Any:
        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout for URL: {url}")
            raise SchemaSourceError(f"Request timeout for URL: {url}") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error for URL {url}: {e}")
            raise SchemaSourceError(f"Connection error for URL: {url}") from e
        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
            raise SchemaSourceError(f"HTTP error {e.response.status_code} for URL: {url}") from e
        except (requests.exceptions.JSONDecodeError, json.JSONDecodeError) as e:
            # JSONDecodeError is also a RequestException, so it has to come first
            logger.error(f"Invalid JSON response from URL {url}: {e}")
            raise SchemaSourceError(f"Invalid JSON response from URL {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for URL {url}: {e}", exc_info=True)
            raise SchemaSourceError(f"Request error for URL {url}: {e}") from e

    def list_content_types(self) -> list[ContentTypeSchema]:
        """
        Fetch all content types of the project, following pagination.

        Raises:
            SchemaSourceError: On transport, HTTP or decoding errors
        """
        types = []
        url = self.types_url
        while url:
            data = self._get(url)
            types.extend(parse_content_types(data))
            url = (data.get("pagination") or {}).get("next_page") or ""
        logger.info("Fetched %d content type(s) for project %s", len(types), self.project_id)
        return types

"""Sanity content store HTTP client."""

import asyncio
import json
import logging
from http.client import HTTPException
from urllib.error import HTTPError
from urllib.parse import quote, urlencode
from urllib.request import Request, urlopen

from django.conf import settings

from .exceptions import ContentStoreError

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2024-01-01"


class SanityClient:
    """Read-only client for the Sanity query API."""

    def __init__(
        self,
        *,
        project_id: str,
        dataset: str = "production",
        api_version: str = DEFAULT_API_VERSION,
        use_cdn: bool = True,
        token: str = "",
        timeout: int = 10,
    ) -> None:
        self.project_id = project_id
        self.dataset = dataset
        self.api_version = api_version.lstrip("v")
        self.use_cdn = use_cdn
        self.token = token
        self.timeout = timeout

    @property
    def host(self) -> str:
        api = "apicdn" if self.use_cdn else "api"
        return f"https://{self.project_id}.{api}.sanity.io"

    def build_query_url(self, query: str, params: dict | None = None) -> str:
        """Build the GET URL for a GROQ query. Parameter values are JSON-encoded."""
        pairs = [("query", query)]
        for name, value in (params or {}).items():
            pairs.append((f"${name}", json.dumps(value)))
        path = f"/v{self.api_version}/data/query/{quote(self.dataset)}"
        return f"{self.host}{path}?{urlencode(pairs)}"

    def _request(self, url: str) -> dict:
        """Synchronous query request (for use in executors)."""
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        req = Request(url, headers=headers)  # noqa: S310
        try:
            with urlopen(req, timeout=self.timeout) as response:  # noqa: S310
                return json.loads(response.read())
        except HTTPError as exc:
            body = exc.read().decode(errors="replace")[:300]
            msg = f"Sanity query returned HTTP {exc.code}: {body}"
            logger.error(msg)
            raise ContentStoreError(msg) from exc
        except (OSError, HTTPException) as exc:
            msg = f"Sanity query request failed: {exc}"
            logger.error(msg)
            raise ContentStoreError(msg) from exc
        except (json.JSONDecodeError, ValueError) as exc:
            msg = "Sanity query returned a malformed body"
            logger.error(msg)
            raise ContentStoreError(msg) from exc

    async def fetch(self, query: str, params: dict | None = None):
        """Run a GROQ query and return its ``result`` member.

        Raises:
            ContentStoreError: If the store cannot be reached or answers with an error.
        """
        if not self.project_id:
            msg = "SANITY_PROJECT_ID is not configured"
            raise ContentStoreError(msg)

        url = self.build_query_url(query, params)
        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(None, self._request, url)

        if not isinstance(data, dict) or "result" not in data:
            msg = f"Sanity response has no result member: {str(data)[:200]}"
            logger.error(msg)
            raise ContentStoreError(msg)
        return data["result"]


def get_client() -> SanityClient:
    """Return a client configured from settings."""
    return SanityClient(
        project_id=getattr(settings, "SANITY_PROJECT_ID", ""),
        dataset=getattr(settings, "SANITY_DATASET", "production"),
        api_version=getattr(settings, "SANITY_API_VERSION", DEFAULT_API_VERSION),
        use_cdn=getattr(settings, "SANITY_USE_CDN", True),
        token=getattr(settings, "SANITY_API_TOKEN", ""),
    )

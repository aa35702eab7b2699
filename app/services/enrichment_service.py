"""Best-effort enrichment of new employees with a picture URL and a quote.

Lookups never raise to the caller: a failure of any kind is logged and the
corresponding field is left as ``None``.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

import aiohttp

from app.core.config import Settings
from app.core.errors import UpstreamLookupError
from app.models.employee import Enrichment

logger = logging.getLogger(__name__)


class EnrichmentService:
    def __init__(self) -> None:
        self.session: aiohttp.ClientSession | None = None
        self.initialized = False
        self.timeout = 0.0
        self.picture_service_url = ""
        self.picture_max_page = 0
        self.picture_size = 0
        self.quote_service_url = ""

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.ENRICHMENT_ENABLED:
            logger.warning("Enrichment disabled; new employees will have no picture or quote")
            return

        self.timeout = settings.ENRICHMENT_TIMEOUT_SECONDS
        self.picture_service_url = settings.PICTURE_SERVICE_URL.rstrip("/")
        self.picture_max_page = settings.PICTURE_MAX_PAGE
        self.picture_size = settings.PICTURE_SIZE
        self.quote_service_url = settings.QUOTE_SERVICE_URL
        self.session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
        self.initialized = True
        logger.info("EnrichmentService initialized (timeout=%ss)", self.timeout)

    async def close(self) -> None:
        if self.session:
            await self.session.close()
            self.session = None
        self.initialized = False

    async def fetch_picture_url(self) -> str:
        if not self.initialized or not self.session:
            raise UpstreamLookupError("EnrichmentService not initialized")

        page = random.randrange(self.picture_max_page)  # noqa: S311
        url = f"{self.picture_service_url}/v2/list"
        params = {"page": str(page), "limit": "1"}

        async with self.session.get(url, params=params) as response:
            if response.status != 200:
                raise UpstreamLookupError(f"Picture listing failed: {response.status}")
            data = await response.json(content_type=None)

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            raise UpstreamLookupError(f"Unexpected picture listing for page {page}: {data!r}")

        image_id = data[0].get("id")
        if image_id is None or image_id == "":
            raise UpstreamLookupError(f"Picture listing for page {page} has no id")

        return f"{self.picture_service_url}/id/{image_id}/{self.picture_size}"

    async def fetch_quote(self) -> str:
        if not self.initialized or not self.session:
            raise UpstreamLookupError("EnrichmentService not initialized")

        async with self.session.get(self.quote_service_url) as response:
            if response.status != 200:
                raise UpstreamLookupError(f"Quote lookup failed: {response.status}")
            return await response.text()

    async def _best_effort(self, name: str, lookup: Callable[[], Awaitable[str]]) -> str | None:
        try:
            return await asyncio.wait_for(lookup(), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("%s lookup timed out after %ss", name, self.timeout)
        except Exception as e:
            logger.warning("%s lookup failed: %s", name, e)
        return None

    async def enrich(self) -> Enrichment:
        if not self.initialized:
            return Enrichment()

        picture_url, quote = await asyncio.gather(
            self._best_effort("picture", self.fetch_picture_url),
            self._best_effort("quote", self.fetch_quote),
        )
        return Enrichment(picture_url=picture_url, quote=quote)


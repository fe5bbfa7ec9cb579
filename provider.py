"""Actor headshot lookup: the entry point the media host calls."""

import asyncio
import enum
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

import httpx

from cache import ManifestCache
from config import Config
from logging_setup import configure_from, get_logger
from manifest import Manifest, fetch_manifest
from matcher import find_actor_image
from urls import compose_image_url

logger = get_logger("provider")


class ImageType(str, enum.Enum):
    PRIMARY = "primary"


@dataclass(frozen=True)
class ImageRecord:
    provider_name: str
    url: str
    image_type: ImageType
    date_modified: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActorImageProvider:
    """Resolve person names to headshot URLs from a remote Filetree.json.

    Lookups never raise: fetch failures, missing matches and unexpected
    errors all come back as an empty list.
    """

    name = "Local Actor Headshot Provider"
    order = 1

    def __init__(
        self,
        config: Config,
        *,
        client: httpx.AsyncClient | None = None,
        cache: ManifestCache | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.config = config
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=True)
        self._cache = cache or ManifestCache(config.cache_duration)
        self._clock = clock
        configure_from(config)

    async def __aenter__(self) -> "ActorImageProvider":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def supports(self, entity_kind: str | None) -> bool:
        return bool(entity_kind) and entity_kind.lower() == "person"

    def supported_image_types(self) -> list[ImageType]:
        return [ImageType.PRIMARY]

    async def get_manifest(self, cancel: asyncio.Event | None = None) -> Manifest:
        async def fetch() -> Manifest:
            result = await fetch_manifest(
                self.config.manifest_url,
                client=self._client,
                timeout=self.config.request_timeout,
                cancel=cancel,
            )
            if not result.ok:
                logger.warning(
                    "Using empty manifest for the next %d minutes (%s)",
                    self.config.cache_duration_minutes,
                    result.error,
                )
            return result.manifest

        return await self._cache.get_or_fetch(fetch)

    async def lookup(
        self,
        person_name: str | None,
        cancel: asyncio.Event | None = None,
    ) -> list[ImageRecord]:
        """Return the headshot for ``person_name``, or an empty list."""
        if not person_name or not person_name.strip():
            return []

        try:
            manifest = await self.get_manifest(cancel)
            match = find_actor_image(manifest, person_name)
            if match is None:
                logger.warning("No image found for actor %s", person_name)
                return []

            image_url = compose_image_url(
                self.config.base_url,
                self.config.content_path,
                match.category,
                match.filename,
            )
            logger.info("Found image for actor %s: %s", person_name, image_url)
            return [
                ImageRecord(
                    provider_name=self.name,
                    url=image_url,
                    image_type=ImageType.PRIMARY,
                    date_modified=self._clock(),
                )
            ]
        except Exception:
            logger.exception("Error getting image for actor %s", person_name)
            return []

    async def get_images(
        self,
        entity_kind: str | None,
        person_name: str | None,
        cancel: asyncio.Event | None = None,
    ) -> list[ImageRecord]:
        """Host-facing entry point; non-person entities get no images."""
        if not self.supports(entity_kind):
            return []
        return await self.lookup(person_name, cancel)

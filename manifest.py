"""Manifest fetching and parsing for the actor headshot provider."""

import asyncio
from contextlib import suppress
from dataclasses import dataclass, field

import httpx

from logging_setup import get_logger

logger = get_logger("manifest")

# category -> (filename -> image reference); dict order is document order
Manifest = dict[str, dict[str, str]]


class ManifestParseError(ValueError):
    """The manifest document does not have the expected shape."""


class FetchCancelled(Exception):
    """The caller's cancel event fired before the manifest arrived."""


@dataclass(frozen=True)
class FetchResult:
    manifest: Manifest = field(default_factory=dict)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def empty(cls, reason: str) -> "FetchResult":
        return cls(manifest={}, error=reason)


def parse_manifest(payload: object) -> Manifest:
    """Convert a decoded Filetree.json document into a Manifest.

    The manifest structure is:
    {
        "Content": {
            "category1": {"John Doe.jpg": "johndoe.jpg?t=123", ...},
            "category2": {...},
            ...
        }
    }

    Field names are matched case-insensitively. Categories that are not
    objects and entries whose value is not a string are skipped.
    """
    if not isinstance(payload, dict):
        raise ManifestParseError(
            f"expected a JSON object, got {type(payload).__name__}"
        )

    content = None
    for key, value in payload.items():
        if isinstance(key, str) and key.casefold() == "content":
            content = value
            break

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ManifestParseError(
            f"'Content' must be an object, got {type(content).__name__}"
        )

    manifest: Manifest = {}
    for category, entries in content.items():
        if not isinstance(entries, dict):
            logger.debug("Skipping category %r: not an object", category)
            continue
        manifest[category] = {}
        for filename, reference in entries.items():
            if not isinstance(reference, str):
                logger.debug(
                    "Skipping entry %r in category %r: reference is not a string",
                    filename,
                    category,
                )
                continue
            manifest[category][filename] = reference

    return manifest


async def _get(
    client: httpx.AsyncClient,
    url: str,
    timeout: float,
    cancel: asyncio.Event | None,
) -> httpx.Response:
    """GET ``url``, abandoning the request as soon as ``cancel`` is set."""
    if cancel is None:
        return await client.get(url, timeout=timeout)
    if cancel.is_set():
        raise FetchCancelled()

    request = asyncio.ensure_future(client.get(url, timeout=timeout))
    cancelled = asyncio.ensure_future(cancel.wait())
    try:
        await asyncio.wait(
            {request, cancelled}, return_when=asyncio.FIRST_COMPLETED
        )
    finally:
        for task in (request, cancelled):
            if not task.done():
                task.cancel()

    if request.done() and not request.cancelled():
        return request.result()

    with suppress(asyncio.CancelledError):
        await request
    raise FetchCancelled()


async def fetch_manifest(
    manifest_url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = 30.0,
    cancel: asyncio.Event | None = None,
) -> FetchResult:
    """Fetch and parse the manifest at ``manifest_url``.

    Never raises for transport, parse or cancellation failures: they are
    logged with the URL and turned into an empty manifest.
    """
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(follow_redirects=True)

    try:
        response = await _get(client, manifest_url, timeout, cancel)
        response.raise_for_status()
        manifest = parse_manifest(response.json())
    except FetchCancelled:
        logger.warning("Fetching manifest from %s was cancelled", manifest_url)
        return FetchResult.empty("cancelled")
    except httpx.HTTPError as e:
        logger.error("Error fetching manifest from %s: %s", manifest_url, e)
        return FetchResult.empty(f"transport: {e}")
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and ManifestParseError
        logger.error("Invalid manifest at %s: %s", manifest_url, e)
        return FetchResult.empty(f"parse: {e}")
    finally:
        if owns_client:
            await client.aclose()

    logger.debug(
        "Fetched manifest from %s: %d categories, %d entries",
        manifest_url,
        len(manifest),
        sum(len(entries) for entries in manifest.values()),
    )
    return FetchResult(manifest=manifest)

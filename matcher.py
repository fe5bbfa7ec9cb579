"""Name normalization and manifest matching."""

import os
from dataclasses import dataclass

from logging_setup import get_logger
from manifest import Manifest

logger = get_logger("matcher")


@dataclass(frozen=True)
class MatchResult:
    category: str
    filename: str


def normalize_name(name: str | None) -> str:
    """Remove spaces and lower-case ``name``; ``None`` becomes ``""``."""
    if name is None:
        return ""
    return name.replace(" ", "").lower()


def strip_extension(filename: str) -> str:
    """Return the base name of ``filename`` without its last extension."""
    base = filename.replace("\\", "/").rsplit("/", 1)[-1]
    return os.path.splitext(base)[0]


def clean_reference(reference: str) -> str:
    """Drop a trailing query string such as a cache-busting timestamp.

    A reference starting with ``?`` is returned unchanged.
    """
    index = reference.find("?")
    if index > 0:
        return reference[:index]
    return reference


def find_actor_image(manifest: Manifest, name: str | None) -> MatchResult | None:
    """Find the first manifest entry whose filename matches ``name``.

    Categories and their entries are walked in stored order. A filename
    matches when it equals the query after normalization, either whole or
    with its extension removed.
    """
    wanted = normalize_name(name)

    for category, entries in manifest.items():
        for filename, reference in entries.items():
            candidates = (
                normalize_name(filename),
                normalize_name(strip_extension(filename)),
            )
            if wanted in candidates:
                logger.debug(
                    "Matched %r to %r in category %r", name, filename, category
                )
                return MatchResult(category, clean_reference(reference))

    return None

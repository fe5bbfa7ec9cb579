"""Actor Headshot Provider - resolve actor names to headshot URLs from the command line."""

import argparse
import asyncio
import sys
from pathlib import Path

from config import Config
from logging_setup import get_logger, setup_logging
from provider import ActorImageProvider


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve actor names to headshot URLs using a remote Filetree.json",
    )
    parser.add_argument(
        "names",
        nargs="+",
        help="Actor names to look up",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.toml)",
    )
    parser.add_argument(
        "-b", "--base-url",
        type=str,
        default=None,
        help="Override base URL from config",
    )
    parser.add_argument(
        "-t", "--cache-minutes",
        type=int,
        default=None,
        help="Override manifest cache duration in minutes",
    )

    # Logging verbosity (mutually exclusive)
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable detailed output (DEBUG level)",
    )
    verbosity_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only warnings and errors)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to file (always DEBUG level)",
    )

    return parser.parse_args(argv)


async def resolve(config: Config, names: list[str]) -> dict[str, str | None]:
    """Look up every name with one provider, so the manifest is fetched once."""
    results: dict[str, str | None] = {}
    async with ActorImageProvider(config) as provider:
        for name in names:
            images = await provider.lookup(name)
            results[name] = images[0].url if images else None
    return results


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    config = Config.load(
        config_path=args.config,
        base_url_override=args.base_url,
        cache_duration_override=args.cache_minutes,
        detailed_logging_override=True if args.verbose else None,
    )

    verbosity = 1 if config.enable_detailed_logging else (-1 if args.quiet else 0)
    setup_logging(verbosity=verbosity, log_file=args.log_file)
    logger = get_logger()

    logger.debug("Manifest URL: %s", config.manifest_url)
    logger.debug("Cache duration: %d minutes", config.cache_duration_minutes)

    results = asyncio.run(resolve(config, args.names))

    for name, url in results.items():
        print(f"{name}: {url or '(no image)'}")

    if all(results.values()):
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from shortcut_crx.app_factory import create_generator
from shortcut_crx.generator.domain.exceptions import (
    InvalidInputError,
    InvalidUrlError,
    ShortcutError,
)
from shortcut_crx.logger import get_logger, set_package_level

logger = get_logger("shortcut-crx")

EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


async def generate_to_disk(
    url: str, output: Optional[Path] = None, directory: Optional[Path] = None
) -> Path:
    """
    Generate the extension for ``url`` and write it to disk.

    Args:
        url: Page the shortcut should open
        output: Explicit output file; overrides ``directory``
        directory: Directory for the suggested filename (default: cwd)

    Returns:
        Path of the written package
    """
    generator = create_generator()
    extension = await generator.generate(url)

    target = output or (directory or Path.cwd()) / extension.filename
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(extension.content)

    logger.info(
        f"Saved {extension.config.title!r} to {target} ({extension.size} bytes, "
        f"icon: {extension.config.icon_resolution.outcome.value})"
    )
    return target


def main(argv=None) -> int:
    """Parse command line arguments and generate the extension."""
    parser = argparse.ArgumentParser(
        description="Turn a web page URL into an installable shortcut extension"
    )
    parser.add_argument("url", help="URL of the page the shortcut opens")
    parser.add_argument("-o", "--output", type=Path, help="Output file (.crx)")
    parser.add_argument(
        "-d", "--directory", type=Path, help="Directory for the suggested filename"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_package_level(logging.DEBUG)
        logger.setLevel(logging.DEBUG)

    try:
        target = asyncio.run(generate_to_disk(args.url, args.output, args.directory))
    except (InvalidInputError, InvalidUrlError) as e:
        logger.error(e.message)
        return EXIT_INVALID_INPUT
    except ShortcutError as e:
        logger.error(str(e))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.info("Generation interrupted by user")
        return EXIT_FAILURE

    print(target)
    return 0


if __name__ == "__main__":
    sys.exit(main())

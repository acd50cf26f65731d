"""
Non-blocking file helpers built on aiofiles.
"""

from pathlib import Path

import aiofiles
import aiofiles.os

from shortcut_crx.core.constants import DOWNLOAD_CHUNK_SIZE


async def copy_file(source: Path, destination: Path) -> Path:
    """Copy ``source`` over ``destination`` without blocking the event loop."""
    destination = Path(destination)
    await aiofiles.os.makedirs(destination.parent, exist_ok=True)

    async with aiofiles.open(source, "rb") as reader:
        async with aiofiles.open(destination, "wb") as writer:
            while True:
                chunk = await reader.read(DOWNLOAD_CHUNK_SIZE)
                if not chunk:
                    break
                await writer.write(chunk)

    return destination


async def file_exists(path: Path) -> bool:
    return await aiofiles.os.path.isfile(path)

import asyncio
import logging
import os
import stat
from typing import AsyncIterator, BinaryIO, List

import httpx

from SRI_Generate.core.digest import CHUNK_SIZE, compute_integrities
from SRI_Generate.core.errors import (
    DirectoryListError,
    FetchError,
    FileOpenError,
)
from SRI_Generate.core.fanout import gather_first_error
from SRI_Generate.core.models import IntegrityRecord, TargetKind, is_remote_target

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


# ============================================================
# Classification
# ============================================================

def classify_target(target: str) -> TargetKind:
    """
    Decide how a target string is resolved.

    - absolute URI with a host → REMOTE_RESOURCE
    - existing, non-empty regular file → REGULAR_FILE
    - anything else → DIRECTORY (listing errors surface later)
    """
    if is_remote_target(target):
        return TargetKind.REMOTE_RESOURCE

    try:
        st = os.stat(target)
    except (OSError, ValueError):
        return TargetKind.DIRECTORY

    if stat.S_ISREG(st.st_mode) and st.st_size > 0:
        return TargetKind.REGULAR_FILE

    return TargetKind.DIRECTORY


# ============================================================
# Byte sources
# ============================================================

async def _iter_file(fh: BinaryIO) -> AsyncIterator[bytes]:
    while True:
        chunk = await asyncio.to_thread(fh.read, CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


# ============================================================
# Handlers
# ============================================================

async def _download(
    target: str,
    algorithm: str,
    client: httpx.AsyncClient,
) -> List[IntegrityRecord]:
    async with client.stream("GET", target, follow_redirects=True) as response:
        logger.debug("GET %s -> %s", target, response.status_code)
        return await compute_integrities(
            target,
            algorithm,
            response.aiter_bytes(CHUNK_SIZE),
        )


async def handle_download(
    target: str,
    algorithm: str,
    client: httpx.AsyncClient,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[IntegrityRecord]:
    """
    GET a remote resource and hash its body.

    Redirects are followed. Any final status code is accepted; only
    transport failures raise. `timeout` bounds the whole request,
    body included.
    """
    try:
        return await asyncio.wait_for(
            _download(target, algorithm, client),
            timeout,
        )
    except asyncio.TimeoutError as exc:
        raise FetchError(
            f"Failure downloading script from {target}. "
            f"Timed out after {timeout}s"
        ) from exc
    except (httpx.TransportError, httpx.InvalidURL) as exc:
        raise FetchError(
            f"Failure downloading script from {target}. {exc}"
        ) from exc


async def handle_file(target: str, algorithm: str) -> List[IntegrityRecord]:
    try:
        fh = await asyncio.to_thread(open, target, "rb")
    except OSError as exc:
        raise FileOpenError(f"Unable to open {target}. {exc}") from exc

    try:
        return await compute_integrities(target, algorithm, _iter_file(fh))
    finally:
        fh.close()


def _list_regular_files(target: str) -> List[str]:
    files = []

    with os.scandir(target) as entries:
        for entry in entries:
            if entry.is_file():
                files.append(entry.path)
            else:
                logger.debug("Skipping non-regular entry %s", entry.path)

    return files


async def handle_directory(
    target: str,
    algorithm: str,
) -> List[IntegrityRecord]:
    """
    Hash every regular file directly inside `target`.

    Not recursive. Subdirectories and other non-regular entries are
    skipped. If any file fails, the first failure is raised after all
    files have been processed.
    """
    try:
        paths = await asyncio.to_thread(_list_regular_files, target)
    except OSError as exc:
        raise DirectoryListError(
            f"Unable to list directory {target}. {exc}"
        ) from exc

    per_file = await gather_first_error(
        handle_file(path, algorithm) for path in paths
    )

    combined: List[IntegrityRecord] = []
    for records in per_file:
        combined.extend(records)

    logger.debug(
        "Directory %s: %d files, %d digests", target, len(paths), len(combined)
    )
    return combined


async def handle_target(
    target: str,
    algorithm: str,
    client: httpx.AsyncClient,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[IntegrityRecord]:
    kind = classify_target(target)

    if kind is TargetKind.REMOTE_RESOURCE:
        return await handle_download(target, algorithm, client, timeout)
    if kind is TargetKind.REGULAR_FILE:
        return await handle_file(target, algorithm)
    return await handle_directory(target, algorithm)

import asyncio
import base64
import hashlib
import logging
from typing import AsyncIterator, Callable, Dict, List

import httpx

from SRI_Generate.core.errors import StreamReadError, UnsupportedAlgorithmError
from SRI_Generate.core.models import IntegrityRecord, build_integrity_record

logger = logging.getLogger(__name__)

SHA256 = "sha256"
SHA384 = "sha384"
SHA512 = "sha512"
ALL = "all"

ALGORITHMS: Dict[str, Callable] = {
    SHA256: hashlib.sha256,
    SHA384: hashlib.sha384,
    SHA512: hashlib.sha512,
}

SELECTORS = (SHA256, SHA384, SHA512, ALL)

CHUNK_SIZE = 64 * 1024


def validate_algorithm(algorithm: str) -> str:
    if algorithm not in SELECTORS:
        raise UnsupportedAlgorithmError(
            f"Unsupported hash algorithm {algorithm!r}. "
            f"Expected one of: {', '.join(SELECTORS)}"
        )
    return algorithm


def new_hashers(algorithm: str) -> list:
    validate_algorithm(algorithm)

    if algorithm == ALL:
        return [ALGORITHMS[name]() for name in (SHA256, SHA384, SHA512)]

    return [ALGORITHMS[algorithm]()]


def format_digest(hasher) -> str:
    """
    Render a finished hash as `sha<bits>-<base64>`.
    """
    raw = hasher.digest()
    encoded = base64.b64encode(raw).decode("ascii")
    return f"sha{len(raw) * 8}-{encoded}"


async def _update_all(hashers: list, chunk: bytes) -> None:
    if len(hashers) == 1:
        hashers[0].update(chunk)
        return

    # hashlib drops the GIL on large buffers, so the threads overlap
    await asyncio.gather(
        *(asyncio.to_thread(h.update, chunk) for h in hashers)
    )


async def compute_integrities(
    source: str,
    algorithm: str,
    chunks: AsyncIterator[bytes],
) -> List[IntegrityRecord]:
    """
    Hash a byte stream with one or all supported algorithms.

    - `chunks` is consumed exactly once; every chunk is fanned out to
      all requested hashers
    - one record per requested algorithm, in no particular order
    - any failure while reading raises StreamReadError
    """
    hashers = new_hashers(algorithm)
    total = 0

    try:
        async for chunk in chunks:
            if not chunk:
                continue
            total += len(chunk)
            await _update_all(hashers, chunk)
    except (OSError, httpx.HTTPError) as exc:
        raise StreamReadError(f"Failure reading {source}. {exc}") from exc

    digests = await asyncio.gather(
        *(asyncio.to_thread(format_digest, h) for h in hashers)
    )

    logger.debug("Hashed %d bytes from %s (%s)", total, source, algorithm)

    return [build_integrity_record(source, digest) for digest in digests]


async def compute_integrities_from_bytes(
    source: str,
    algorithm: str,
    content: bytes,
) -> List[IntegrityRecord]:
    async def _single():
        yield content

    return await compute_integrities(source, algorithm, _single())

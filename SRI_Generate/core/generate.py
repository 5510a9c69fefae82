import asyncio
import logging
from typing import List, Optional, Sequence

import httpx

from SRI_Generate.core.digest import validate_algorithm
from SRI_Generate.core.errors import EmptyResultError
from SRI_Generate.core.fanout import gather_first_error
from SRI_Generate.core.models import IntegrityRecord
from SRI_Generate.core.targets import DEFAULT_TIMEOUT, handle_target

logger = logging.getLogger(__name__)


def sort_key(record: IntegrityRecord):
    return (record.file_name, record.bits, record.digest, record.source)


# ============================================================
# ASYNC IMPLEMENTATION (single source of truth)
# ============================================================

async def generate(
    targets: Sequence[str],
    algorithm: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[IntegrityRecord]:
    """
    Produce integrity records for every target.

    - Each target is classified and handled concurrently
    - The first failure aborts the whole call, after all targets finish
    - Raises EmptyResultError when nothing was hashed
    - Output is sorted by file name, then algorithm
    """
    validate_algorithm(algorithm)
    targets = list(targets)

    if not targets:
        raise EmptyResultError("No targets given")

    if client is None:
        owned = httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        async with owned:
            return await generate(
                targets, algorithm, client=owned, timeout=timeout
            )

    per_target = await gather_first_error(
        handle_target(target, algorithm, client, timeout) for target in targets
    )

    records: List[IntegrityRecord] = []
    for target_records in per_target:
        records.extend(target_records)

    if not records:
        raise EmptyResultError(f"Unable to produce integrities for {targets}")

    records.sort(key=sort_key)

    logger.info(
        "Generated %d integrities for %d target(s)", len(records), len(targets)
    )
    return records


# ============================================================
# SYNC WRAPPER
# ============================================================

def generate_integrities(
    targets: Sequence[str],
    algorithm: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
):
    """
    Sync wrapper for generate.
    Returns a Task instead when called inside a running loop.
    """
    coro = generate(targets, algorithm, client=client, timeout=timeout)

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    else:
        return loop.create_task(coro)

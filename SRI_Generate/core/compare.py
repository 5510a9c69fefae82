import logging
from typing import Optional, Sequence

import httpx

from SRI_Generate.core.digest import SHA256
from SRI_Generate.core.errors import ComparisonInputError, EmptyResultError
from SRI_Generate.core.generate import generate
from SRI_Generate.core.models import Comparison
from SRI_Generate.core.targets import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


def validate_compare(targets: Sequence[str]) -> None:
    """
    Check comparison arguments before anything is hashed.
    """
    if len(targets) != 2:
        raise ComparisonInputError(
            "Expected two targets to be specified for comparison"
        )

    a, b = targets
    if a == "" or b == "":
        raise ComparisonInputError("Received an empty target for comparison")

    if a == b:
        raise ComparisonInputError(
            "Received two identical inputs for comparison"
        )


async def compare(
    a: str,
    b: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Comparison:
    """
    Compare the sha256 digests of two targets.

    Errors from hashing either target propagate unchanged.
    """
    if client is None:
        owned = httpx.AsyncClient(timeout=timeout, follow_redirects=True)
        async with owned:
            return await compare(a, b, client=owned, timeout=timeout)

    digests = []
    for target in (a, b):
        records = await generate(
            [target], SHA256, client=client, timeout=timeout
        )
        if not records:
            raise EmptyResultError(f"Unable to produce integrities for {target}")
        digests.append(records[0].digest)

    digest_a, digest_b = digests
    result = Comparison(digest_a == digest_b, digest_a, digest_b)

    logger.info("Compared %s and %s: equal=%s", a, b, result.equal)
    return result

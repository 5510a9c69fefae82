import asyncio
from typing import Awaitable, Iterable, List, TypeVar

T = TypeVar("T")


async def gather_first_error(jobs: Iterable[Awaitable[T]]) -> List[T]:
    """
    Run every job concurrently and wait for all of them.

    Results come back in submission order. If any job failed, the
    first failure to complete is raised once every sibling has
    finished; siblings are never cancelled.
    """
    first_error: List[BaseException] = []

    async def _report(job: Awaitable[T]):
        try:
            return await job
        except Exception as exc:
            # only the event loop thread writes here
            if not first_error:
                first_error.append(exc)
            return None

    results = await asyncio.gather(*(_report(job) for job in jobs))

    if first_error:
        raise first_error[0]

    return list(results)

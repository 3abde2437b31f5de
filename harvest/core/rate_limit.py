import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Coroutine, Optional, TypeVar

import httpx

from harvest.config.settings import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RateLimiter:
    """
    Manages concurrency using asyncio.Semaphore.
    """

    def __init__(self, max_concurrent: int):
        if max_concurrent < 1:
            raise ValueError(f"max_concurrent must be >= 1, got {max_concurrent}")
        self.max_concurrent = max_concurrent
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def acquire(self):
        await self._semaphore.acquire()

    def release(self):
        self._semaphore.release()

    async def __aenter__(self):
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.release()


def is_retryable(error: BaseException) -> bool:
    """
    Transport failures (no response) and 5xx responses are worth retrying.
    Client errors are final.
    """
    if isinstance(error, httpx.HTTPStatusError):
        return 500 <= error.response.status_code < 600
    return isinstance(error, httpx.TransportError)


@dataclass(frozen=True)
class RetryPolicy:
    """
    Exponential backoff schedule: base_delay, 2 * base_delay, 4 * base_delay, ...
    """

    max_retries: int = settings.MAX_RETRIES
    base_delay: float = settings.RETRY_BASE_DELAY

    def next_delay(self, attempt: int, error: BaseException) -> Optional[float]:
        """
        Delay in seconds before retry number `attempt + 1`, where `attempt`
        counts the retries already made. None means give up.
        """
        if not is_retryable(error):
            return None
        if attempt >= self.max_retries:
            return None
        return self.base_delay * (2**attempt)


async def call_with_retry(
    func: Callable[[], Coroutine[Any, Any, T]],
    policy: RetryPolicy,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    label: str = "request",
) -> T:
    """
    Await `func()` until it succeeds or the policy gives up, then re-raise the
    last error.
    """
    retries = 0
    while True:
        try:
            return await func()
        except Exception as e:
            delay = policy.next_delay(retries, e)
            if delay is None:
                if is_retryable(e):
                    logger.error(f"Max retries reached for {label}. Error: {e}")
                raise

            logger.warning(
                f"Attempt {retries + 1}/{policy.max_retries} failed for {label}. "
                f"Retrying in {delay:.2f}s. Error: {e}"
            )
            await sleep(delay)
            retries += 1

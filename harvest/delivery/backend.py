import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterator, List, Optional, Sequence

import httpx

from harvest.config.settings import settings
from harvest.core.exceptions import DeliveryBatchFailure
from harvest.core.models import EnrichedJob
from harvest.core.rate_limit import RetryPolicy, call_with_retry
from harvest.delivery.interleave import dedupe_by_url

logger = logging.getLogger(__name__)

# Longest response body kept on a DeliveryBatchFailure.
MAX_LOGGED_BODY = 500


def chunk(items: Sequence[Any], size: int) -> Iterator[Sequence[Any]]:
    if size < 1:
        raise ValueError(f"batch size must be >= 1, got {size}")
    for start in range(0, len(items), size):
        yield items[start : start + size]


def encode_batch(batch: Sequence[EnrichedJob]) -> bytes:
    """JSON body for one batch. Raises TypeError or ValueError for values JSON cannot carry."""
    payload = [job.to_payload() for job in batch]
    return json.dumps(payload, ensure_ascii=False, allow_nan=False).encode("utf-8")


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


@dataclass
class DeliveryReport:
    """
    Outcome of one delivery pass.
    """

    submitted: int = 0
    accepted: int = 0
    batches: int = 0
    failed_batches: List[DeliveryBatchFailure] = field(default_factory=list)
    responses: List[Any] = field(default_factory=list)

    @property
    def rejected(self) -> int:
        return self.submitted - self.accepted


class BackendClient:
    """
    Posts enriched jobs to the backend bulk-replace endpoint in fixed-size
    batches. A batch that fails (after retries, where they apply) is recorded
    and the next batch is still sent.
    """

    def __init__(
        self,
        base_url: str = settings.BACKEND_URL,
        batch_size: int = settings.BATCH_SIZE,
        timeout: float = settings.REQUEST_TIMEOUT,
        policy: Optional[RetryPolicy] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")
        self.base_url = base_url.rstrip("/")
        self.batch_size = batch_size
        self.timeout = timeout
        self.policy = policy or RetryPolicy()
        self.transport = transport
        self.sleep = sleep
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def bulk_replace_url(self) -> str:
        return f"{self.base_url}{settings.BULK_REPLACE_PATH}"

    @property
    def health_url(self) -> str:
        return f"{self.base_url}{settings.HEALTH_PATH}"

    async def __aenter__(self) -> "BackendClient":
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            headers={"Content-Type": "application/json"},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("BackendClient must be used as an async context manager")
        return self._client

    async def health_check(self) -> bool:
        """True when the backend answers the health endpoint with a 2xx."""
        try:
            response = await self.client.get(self.health_url)
        except httpx.HTTPError as e:
            logger.warning(f"Backend health check failed: {e!r}")
            return False
        if response.is_success:
            logger.info(f"Backend is healthy ({response.status_code})")
            return True
        logger.warning(f"Backend health check returned HTTP {response.status_code}")
        return False

    async def post_batch(self, body: bytes, label: str = "batch") -> httpx.Response:
        async def send() -> httpx.Response:
            response = await self.client.post(
                self.bulk_replace_url,
                content=body,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            return response

        return await call_with_retry(send, self.policy, sleep=self.sleep, label=label)

    async def deliver(self, jobs: Sequence[EnrichedJob]) -> DeliveryReport:
        """
        Dedupe by url, split into batches and post each one. Never raises for
        a failed batch; failures are returned on the report.
        """
        report = DeliveryReport()
        if not jobs:
            logger.warning("No jobs to send - empty list provided")
            return report

        unique = dedupe_by_url(jobs)
        batches = list(chunk(unique, self.batch_size))
        logger.info(
            f"Sending {len(unique)} jobs to {self.bulk_replace_url} in {len(batches)} batches"
        )

        for index, batch in enumerate(batches, start=1):
            label = f"batch {index}/{len(batches)}"
            report.batches += 1
            report.submitted += len(batch)
            try:
                body = encode_batch(batch)
            except (TypeError, ValueError) as e:
                failure = DeliveryBatchFailure(index, len(batch), reason=f"unserializable payload: {e}")
                report.failed_batches.append(failure)
                logger.error(str(failure))
                continue

            try:
                response = await self.post_batch(body, label=label)
            except httpx.HTTPStatusError as e:
                failure = DeliveryBatchFailure(
                    index,
                    len(batch),
                    reason=str(e),
                    status_code=e.response.status_code,
                    body=e.response.text[:MAX_LOGGED_BODY],
                )
                report.failed_batches.append(failure)
                logger.error(f"{failure}. Response body: {failure.body}")
                continue
            except httpx.HTTPError as e:
                failure = DeliveryBatchFailure(index, len(batch), reason=repr(e))
                report.failed_batches.append(failure)
                logger.error(f"{failure}. No response received")
                continue

            report.accepted += len(batch)
            report.responses.append(_decode(response))
            logger.info(f"Delivered {label} ({len(batch)} jobs)")

        logger.info(
            f"Delivery finished: {report.accepted}/{report.submitted} jobs accepted, "
            f"{len(report.failed_batches)} failed batches"
        )
        return report

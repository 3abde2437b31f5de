from typing import Any, Optional


class HarvestError(Exception):
    """Base class for pipeline errors."""


class ProducerFailure(HarvestError):
    """A single producer invocation raised."""

    def __init__(self, name: str, cause: BaseException):
        self.name = name
        self.cause = cause
        super().__init__(f"{name} failed: {cause}")

    @property
    def message(self) -> str:
        return str(self.cause) or type(self.cause).__name__


class MalformedProducerResult(HarvestError):
    """A producer resolved with something that is not a sequence of records."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(
            f"{name} returned {type(value).__name__} instead of a list of jobs"
        )


class DeliveryBatchFailure(HarvestError):
    """A delivery batch exhausted its retry budget or was rejected."""

    def __init__(
        self,
        index: int,
        size: int,
        reason: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        self.index = index
        self.size = size
        self.reason = reason
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"Batch {index} ({size} jobs) failed: {reason}"
            + (f" [HTTP {status_code}]" if status_code is not None else "")
        )


class CriticalPipelineFailure(HarvestError):
    """Failure outside the per-producer and per-batch isolation boundaries."""

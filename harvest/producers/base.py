from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from harvest.config.settings import settings


@dataclass(frozen=True)
class ProducerOptions:
    """
    Configuration object handed to every producer invocation.
    """

    headless: bool = settings.HEADLESS


# A producer is any async callable taking ProducerOptions and resolving with a
# sequence of job records (RawJob instances or plain dicts).
Producer = Callable[[ProducerOptions], Awaitable[Any]]


def producer_name(producer: Producer) -> str:
    name = getattr(producer, "name", None) or getattr(producer, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return type(producer).__name__


@dataclass(frozen=True)
class ProducerBinding:
    """
    One scheduled producer invocation.
    """

    name: str
    producer: Producer
    options: ProducerOptions = field(default_factory=ProducerOptions)

    @classmethod
    def of(cls, producer: Producer, headless: bool = settings.HEADLESS) -> "ProducerBinding":
        return cls(producer_name(producer), producer, ProducerOptions(headless=headless))

    async def invoke(self) -> Any:
        return await self.producer(self.options)

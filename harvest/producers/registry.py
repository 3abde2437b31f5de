"""
Producer registry.

Producers live outside this package. They are made available to a run either
by decorating them with `register_producer` or by naming them in the
PRODUCERS setting as "package.module:attribute".
"""

import importlib
import inspect
import logging
from typing import Dict, Iterable, List, Optional

from harvest.config.settings import settings
from harvest.producers.base import (
    Producer,
    ProducerBinding,
    ProducerOptions,
    producer_name,
)

logger = logging.getLogger(__name__)

PRODUCERS: Dict[str, Producer] = {}


def register_producer(name: Optional[str] = None):
    """
    Decorator adding a producer function or class to the registry.
    Classes are instantiated with no arguments.
    """

    def decorator(obj):
        producer = obj() if inspect.isclass(obj) else obj
        key = name or producer_name(producer)
        if key in PRODUCERS:
            logger.warning(f"Producer '{key}' registered twice, keeping the latest")
        PRODUCERS[key] = producer
        return obj

    return decorator


def resolve_producer(path: str) -> Producer:
    """
    Import "package.module:attribute" and return the producer it names.
    """
    module_name, sep, attr = path.strip().partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Producer path '{path}' must look like 'package.module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import producer module '{module_name}': {e}") from e

    try:
        obj = getattr(module, attr)
    except AttributeError as e:
        raise ValueError(f"Module '{module_name}' has no producer '{attr}'") from e

    producer = obj() if inspect.isclass(obj) else obj
    if not callable(producer):
        raise ValueError(f"Producer '{path}' is not callable")
    return producer


def parse_paths(raw: str) -> List[str]:
    return [p.strip() for p in raw.split(",") if p.strip()]


def load_producers(
    paths: Optional[Iterable[str]] = None,
    headless: bool = settings.HEADLESS,
) -> List[ProducerBinding]:
    """
    Build the bindings for a run: every producer named in `paths` (defaults to
    the PRODUCERS setting) followed by every registered producer.
    """
    if paths is None:
        paths = parse_paths(settings.PRODUCERS)

    bindings: List[ProducerBinding] = []
    seen = set()
    for path in paths:
        producer = resolve_producer(path)
        binding = ProducerBinding.of(producer, headless=headless)
        bindings.append(binding)
        seen.add(binding.name)

    for name, producer in PRODUCERS.items():
        if name in seen:
            continue
        bindings.append(ProducerBinding(name, producer, ProducerOptions(headless=headless)))

    logger.info(f"Loaded {len(bindings)} producers: {[b.name for b in bindings]}")
    return bindings

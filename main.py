import asyncio
import logging
import sys

from harvest.config.settings import settings
from harvest.core.exceptions import CriticalPipelineFailure
from harvest.core.runner import runner

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)


async def main():
    """
    Main entry point. Producers come from the PRODUCERS setting and the
    registry.
    """
    await runner.run()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except CriticalPipelineFailure:
        sys.exit(1)
    except KeyboardInterrupt:
        pass

"""Command-line runner: poll one query and log every row."""

import asyncio
import logging
import signal
import sys

from idle_agent.backend import create_backend
from idle_agent.config import Config, setup_logging
from idle_agent.errors import PollError
from idle_agent.params import AgentParams, QueryAction
from idle_agent.records import GenericRow
from idle_agent.scheduler import IdleAgent

logger = logging.getLogger(__name__)


def log_row(row: GenericRow) -> None:
    logger.info("Row: %s", row.model_dump())


def log_error(error: PollError) -> None:
    logger.error("Error while polling: %s", error)


async def main() -> None:
    """Main entry point."""
    config = Config.load()
    setup_logging(config.log_level)

    engine = create_backend(config.database_url)
    params = AgentParams.new(
        [QueryAction.new(engine, config.poll_query, log_row)],
        config.poll_interval_seconds,
        log_error,
        GenericRow,
    )
    handle = IdleAgent(params).start()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, handle.cancel)

    try:
        await handle.join()
    finally:
        engine.dispose()
        logger.info("Shutdown complete")


def run() -> None:
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Agent stopped by user")
        sys.exit(0)


if __name__ == "__main__":
    run()

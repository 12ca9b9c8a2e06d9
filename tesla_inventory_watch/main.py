"""
Main entry point for the Tesla Inventory Watch.

Meant to be started by an external scheduler; each invocation performs
exactly one inventory check and exits with its status.
"""

import asyncio
import sys

from .models.config import Configuration
from .orchestrator import EXIT_FAILURE, InventoryWatchOrchestrator
from .services.config_manager import ConfigurationManager
from .utils.error_handling import ConfigurationError, get_error_tracker
from .utils.logging import get_logger, setup_logging


async def async_main(config: Configuration) -> int:
    """Async main application entry point."""
    setup_logging(log_dir=config.log_dir, log_level="INFO")
    logger = get_logger("main")

    logger.info(
        "Starting Tesla inventory check",
        extra={
            "max_price": config.max_price,
            "min_range_km": config.min_range_km,
            "market": config.search.market,
        },
    )

    orchestrator = InventoryWatchOrchestrator(config)
    exit_code = await orchestrator.run()

    logger.info(
        "Tesla inventory check finished",
        extra={
            "exit_code": exit_code,
            "error_stats": get_error_tracker().get_error_stats(),
        },
    )
    return exit_code


def main():
    """Main application entry point."""
    # Credentials are checked before any network activity
    try:
        config = ConfigurationManager().load_config()
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        sys.exit(EXIT_FAILURE)

    try:
        exit_code = asyncio.run(async_main(config))
    except KeyboardInterrupt:
        print("\nShutdown requested by user", file=sys.stderr)
        exit_code = EXIT_FAILURE

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

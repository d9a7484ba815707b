"""CLI entry point."""

import os
import sys
from pathlib import Path

from common.logging_config import setup_logging
from cli.config import Config
from cli.repl import repl_loop
from vfs import config as vfs_config
from vfs.service_locator import build_services, set_services


def main() -> None:
    """Entry point for CLI."""
    config = Config(Path(vfs_config.CONFIG_PATH))

    log_level = 'DEBUG' if '--debug' in sys.argv else os.getenv('LOG_LEVEL', config.get_log_level())
    log_file = config.get_log_file()

    logger = setup_logging('cli', log_level=log_level, log_file=log_file)
    setup_logging('vfs', log_level=log_level, log_file=log_file)

    if '--debug' in sys.argv:
        logger.info("Debug logging enabled")
        sys.argv.remove('--debug')

    services = build_services(**config.get_store_paths())
    set_services(services)

    logger.info("CLI starting...")
    try:
        repl_loop(services, config)
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")


if __name__ == "__main__":
    main()

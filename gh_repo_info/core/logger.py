# gh_repo_info/core/logger.py

import logging
import sys


def setup_logging(level=logging.INFO):
    """
    Sets up the logging configuration for the command line entry point.
    The library modules only create loggers; they never call this on import.
    """
    # Example: 2026-10-18 12:49:55 | DEBUG    | gh_repo_info.client | GET https://api.github.com/repos/rust-lang/rust
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Prevents duplicate logs if setup_logging is called twice
    if not root_logger.handlers:
        root_logger.addHandler(console_handler)

    # Silence noisy third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

    return root_logger

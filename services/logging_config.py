"""
Logging setup for the car diagnostics components.

Everything logs under the ``car_diagnostics`` logger. Records go to stderr,
and to a file as well when a log path is configured. Diagnostic findings
themselves are written to the engine's sink, not here.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "car_diagnostics"


def setup_logging(level: str = "WARNING", log_path: Optional[str] = None) -> logging.Logger:
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, mode='a')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized - level: {level}, file: {log_path}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a diagnostics component."""
    full_name = name if name.startswith(ROOT_LOGGER) else f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(full_name)

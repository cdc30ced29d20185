"""Opt-in log output for scripts that drive saggy."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    Send the `saggy` logger to stdout and, optionally, to `log_file`.

    Solvers report seeds, damped steps and convergence at DEBUG, each solved
    span at INFO and a failed solve at WARNING. Calling this again replaces
    the handlers from the previous call.
    """
    logger = logging.getLogger("saggy")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized.")
    return logger


__all__ = ["setup_logging"]

import logging
import os
import sys


def get_logger(name="site-shortcut-crx"):
    """
    Configures and returns a standardized logger instance.

    Every module calls this with its own ``__name__`` so output can be
    filtered per component of the pipeline.
    """
    logger = logging.getLogger(name)

    # Set level from environment variable, default to INFO
    if os.environ.get("DEBUG_LOGS_ENABLED", "false").lower() == "true":
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    # Configure handler only if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_package_level(level, prefix="shortcut_crx"):
    """Apply ``level`` to every logger already created under ``prefix``."""
    for name in list(logging.Logger.manager.loggerDict):
        if name == prefix or name.startswith(prefix + "."):
            logging.getLogger(name).setLevel(level)

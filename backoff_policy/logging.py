from __future__ import annotations

import logging

logger = logging.getLogger(__package__)
if not logger.handlers:
    # silent unless the host application configures logging
    logger.addHandler(logging.NullHandler())


def configure(level: int | str = logging.DEBUG) -> logging.Logger:
    """Attach a stderr handler to the package logger, once."""
    if not any(getattr(h, "name", None) == "backoff_policy::stderr" for h in logger.handlers):
        formatter = logging.Formatter(
            "[%(asctime)s] [%(name)s::%(threadName)s] [%(levelname)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        handler = logging.StreamHandler()
        handler.set_name("backoff_policy::stderr")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger

"""
Logging setup for the API process.
Configures the root logger once; later calls are no-ops (tests, reloads).
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger if none is attached yet."""
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)

from __future__ import annotations

import logging


def configure_mocell_logging(*, level: int = logging.INFO) -> None:
    """
    Configure a minimal console logger for mocell.

    Notes:
        - This is opt-in (library code must not call logging.basicConfig()).
        - The handler is only attached if neither the root logger nor the "mocell" logger has handlers.
    """
    root = logging.getLogger()
    mocell_logger = logging.getLogger("mocell")

    # If the user already configured logging, don't interfere.
    if root.handlers or mocell_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    mocell_logger.addHandler(handler)
    mocell_logger.setLevel(level)
    mocell_logger.propagate = False


__all__ = ["configure_mocell_logging"]

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``docval`` namespace.

    Handlers are installed by ``configure_logging`` at the CLI entry point.
    """
    return logging.getLogger(f"docval.{name}")

"""Logging wiring shared by the services."""
import logging

_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """Install a basic stream handler once per process and apply ``level``."""
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        _CONFIGURED = True
    logging.getLogger().setLevel(level.upper())


def get_logger(name: str):
    return logging.getLogger(name)

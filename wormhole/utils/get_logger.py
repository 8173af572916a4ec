import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the "wormhole" namespace.

    Handlers are attached once by configure_logging() at application entry;
    library use without it follows the host application's logging setup.
    """
    return logging.getLogger(f"wormhole.{name}")

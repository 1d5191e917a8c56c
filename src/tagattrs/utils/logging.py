"""Logger factory shared by every tagattrs component."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a named logger with a single stream handler attached.

    Parameters
    ----------
    name : str
        Logger name, conventionally ``f"{__name__}.{self.__class__.__name__}"``.
    verbose : bool, optional
        If True, the logger emits DEBUG records; otherwise only WARNING and above.

    Returns
    -------
    logging.Logger
        The configured logger. Records still propagate to the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger

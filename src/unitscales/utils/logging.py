"""Logger factory shared by all unitscales modules."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a configured logger.

    Parameters
    ----------
    name : str
        Logger name, usually ``f"{__name__}.{self.__class__.__name__}"``.
    verbose : bool, optional
        If True, let DEBUG records through; otherwise only warnings and errors.

    Returns
    -------
    logging.Logger
        Logger with a single stream handler attached.

    Notes
    -----
    Loggers are shared by name. A verbose request lowers the level to DEBUG
    and a later quiet request never raises it again, so objects sharing a
    logger decide on their own ``verbose`` flag whether to emit debug records.
    """
    logger = logging.getLogger(name)
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    # avoid stacking handlers when the same logger is requested repeatedly
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger

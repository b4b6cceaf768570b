import logging
import sys

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name: str = "epitrack", level=logging.INFO):
    """
    Sets up a logger that writes to the console (stdout).
    Child loggers (epitrack.engine, epitrack.registry, ...) propagate to it.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid duplicate logs if setup is called multiple times
    if logger.hasHandlers():
        return logger

    formatter = logging.Formatter(FORMAT)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    return logger

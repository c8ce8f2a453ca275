import logging
import sys

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.INFO, log_file=None):
    """Route the ``byteqr`` loggers to stderr, and to ``log_file`` if given."""
    logger = logging.getLogger('byteqr')
    logger.setLevel(level)
    logger.handlers.clear()
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(FORMAT, datefmt='%H:%M:%S'))
        logger.addHandler(handler)
    return logger

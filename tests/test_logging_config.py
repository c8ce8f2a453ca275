import logging

from byteqr.logging_config import setup_logging


def test_setup_logging(tmp_path):
    log_file = tmp_path / 'byteqr.log'
    logger = setup_logging(logging.DEBUG, str(log_file))
    assert logger.name == 'byteqr'
    assert len(logger.handlers) == 2
    logging.getLogger('byteqr.qr').debug('trial')
    for handler in logger.handlers:
        handler.flush()
    assert 'byteqr.qr - DEBUG - trial' in log_file.read_text()
    # calling again does not stack handlers
    assert len(setup_logging(logging.INFO).handlers) == 1

"""Default configuration values."""
import logging
import os

DEFAULT_VERSION = 1
DEFAULT_SCALE = 10  # pixels per module when rendering
DEFAULT_BORDER = 4  # quiet zone, in modules
COLOR_DARK = 0
COLOR_LIGHT = 255
PORT = int(os.environ.get('BYTEQR_PORT', 3001))
LOG_LEVEL = getattr(logging, os.environ.get('BYTEQR_LOG_LEVEL', 'WARNING').upper(), logging.WARNING)

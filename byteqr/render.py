import cv2
import numpy as np

from . import config
from .matrix import BLACK, UNSET


def _checked(output):
    output = np.asarray(output)
    if (output == UNSET).any():
        raise ValueError('Matrix still has unset modules')
    return output


def to_string(output, separator='\n'):
    output = _checked(output)
    return separator.join(''.join(str(int(j)) for j in i) for i in output)


def to_image(output, scale=config.DEFAULT_SCALE, border=config.DEFAULT_BORDER,
             dark=config.COLOR_DARK, light=config.COLOR_LIGHT):
    output = _checked(output)
    image = np.where(output == BLACK, dark, light).astype(np.uint8)
    image = np.pad(image, border, constant_values=light)
    return np.kron(image, np.ones((scale, scale), dtype=np.uint8))


def write_png(output, path, **kwargs):
    if not cv2.imwrite(str(path), to_image(output, **kwargs)):
        raise OSError('Could not write {}'.format(path))


def encode_png(output, **kwargs):
    ok, buffer = cv2.imencode('.png', to_image(output, **kwargs))
    if not ok:
        raise ValueError('PNG encoding failed')
    return buffer.tobytes()

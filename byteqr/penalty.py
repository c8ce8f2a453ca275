import logging
from collections import namedtuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .matrix import BLACK, WHITE

logger = logging.getLogger(__name__)

W, B = WHITE, BLACK
FINDER_SEQUENCES = np.array((
    (W, W, W, W, B, W, B, B, B, W, B),
    (B, W, B, B, B, W, B, W, W, W, W),
), dtype=np.uint8)


class Penalty(namedtuple('Penalty', ('run', 'box', 'finder'))):
    __slots__ = ()

    @property
    def score(self):
        # box and finder are reported but only runs decide the mask
        return self.run


def _run_penalty(line):
    penalty = 0
    run = 1
    for previous, current in zip(line, line[1:]):
        if current == previous:
            run += 1
            if run == 5:
                penalty += 3
            elif run > 5:
                penalty += 1
        else:
            run = 1
    return penalty


def _box_penalty(output):
    corner = output[:-1, :-1]
    boxes = (corner == output[1:, :-1]) & (corner == output[:-1, 1:]) & (corner == output[1:, 1:])
    return int(boxes.sum()) * 3


def _finder_penalty(output):
    penalty = 0
    length = FINDER_SEQUENCES.shape[1]
    for lines in (output, output.T):
        if lines.shape[1] < length:
            continue
        windows = sliding_window_view(lines, length, axis=1)
        for sequence in FINDER_SEQUENCES:
            penalty += int(np.all(windows == sequence, axis=-1).sum()) * 40
    return penalty


def penalties(output):
    output = np.asarray(output)
    run = sum(_run_penalty(list(line)) for line in output)
    run += sum(_run_penalty(list(line)) for line in output.T)
    result = Penalty(run, _box_penalty(output), _finder_penalty(output))
    logger.debug('RunP: %d BoxP: %d FindP: %d', *result)
    return result


def evaluate(output):
    return penalties(output).score

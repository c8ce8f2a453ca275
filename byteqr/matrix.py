import enum
import numbers

import numpy as np

from .tables import check_version, format_sequence, matrix_size

WHITE = 0
BLACK = 1
UNSET = 2

TIMING = 6


class Mask(enum.Enum):
    M0 = 0, lambda col, row: (col + row) % 2 == 0
    M1 = 1, lambda col, row: row % 2 == 0
    M2 = 2, lambda col, row: col % 3 == 0
    M3 = 3, lambda col, row: (col + row) % 3 == 0
    M4 = 4, lambda col, row: (row // 2 + col // 3) % 2 == 0
    M5 = 5, lambda col, row: (col * row) % 2 + (col * row) % 3 == 0
    M6 = 6, lambda col, row: ((col * row) % 2 + (col * row) % 3) % 2 == 0
    M7 = 7, lambda col, row: ((col + row) % 2 + (col * row) % 3) % 2 == 0

    def __new__(cls, mask_id, predicate):
        member = object.__new__(cls)
        member._value_ = mask_id
        member.predicate = predicate
        return member

    def flips(self, col, row):
        return self.predicate(col, row)

    @classmethod
    def get(cls, mask):
        """Return the member for ``mask`` or None when it is not a mask id."""
        if isinstance(mask, bool) or not isinstance(mask, numbers.Integral):
            return None
        try:
            return cls(int(mask))
        except ValueError:
            return None


def initialize_matrix(version):
    size = matrix_size(version)
    return np.full((size, size), UNSET, dtype=np.uint8)


def add_finder_patterns(output):
    s = output.shape[0]
    for left, top in ((-1, -1), (s - 8, -1), (-1, s - 8)):
        for row in range(max(top, 0), min(top + 9, s)):
            for col in range(max(left, 0), min(left + 9, s)):
                x, y = col - left, row - top
                outline = x in (0, 8) or y in (0, 8)
                inline = (x in (2, 6) and 2 <= y <= 6) or (y in (2, 6) and 2 <= x <= 6)
                output[row, col] = WHITE if outline or inline else BLACK


def add_alignment_patterns(output, version):
    if version <= 1:
        return
    s = output.shape[0]
    for i in range(5):
        for j in range(5):
            ring = (i in (1, 3) and 1 <= j <= 3) or (j in (1, 3) and 1 <= i <= 3)
            output[s - 9 + i, s - 9 + j] = WHITE if ring else BLACK


def add_timing_patterns(output):
    for i in range(8, output.shape[0] - 8):
        color = BLACK if i % 2 == 0 else WHITE
        output[TIMING, i] = color
        output[i, TIMING] = color


def add_dark_module(output):
    output[output.shape[0] - 8, 8] = BLACK


def add_format_information(output, mask):
    s = output.shape[0]
    masking = Mask.get(mask)
    sequence = format_sequence(masking.value if masking is not None else 0)

    row, col = 8, 0
    bits = iter(sequence)
    while col < s:
        if col != TIMING and not 8 <= col < s - 8:
            output[row, col] = BLACK if next(bits) else WHITE
        col += 1

    row, col = s - 1, 8
    bits = iter(sequence)
    while row >= 0:
        if row != TIMING and not 8 < row < s - 7:
            output[row, col] = BLACK if next(bits) else WHITE
        row -= 1


def construct_matrix(version, mask):
    check_version(version)
    output = initialize_matrix(version)
    add_finder_patterns(output)
    add_alignment_patterns(output, version)
    add_timing_patterns(output)
    add_dark_module(output)
    add_format_information(output, mask)
    return output


def mask_color(col, row, bit, mask):
    masking = Mask.get(mask)
    if masking is not None and masking.flips(col, row):
        bit = not bit
    return BLACK if bit else WHITE


def _path(size):
    going_up = True
    for pillar in range((size - 1) // 2, -1, -1):
        col = pillar * 2
        # route around the vertical timing pattern
        if 0 < pillar <= 3:
            col -= 1
        rows = range(size - 1, -1, -1) if going_up else range(size)
        for row in rows:
            yield col, row
            if col > 0:
                yield col - 1, row
        going_up = not going_up


def data_modules(output):
    """Yield the (col, row) of every module still unset, in placement order.

    The state is checked lazily, so callers may paint each module before
    the next one is produced.
    """
    seen = set()
    for col, row in _path(output.shape[0]):
        if (col, row) in seen or output[row, col] != UNSET:
            continue
        seen.add((col, row))
        yield col, row


def add_data_information(output, data, mask):
    for index, (col, row) in enumerate(data_modules(output)):
        bit = bool(data[index]) if index < len(data) else False
        output[row, col] = mask_color(col, row, bit, mask)
    return output


def read_data_information(output, version, mask):
    skeleton = construct_matrix(version, mask)
    masking = Mask.get(mask)
    bits = []
    for col, row in data_modules(skeleton):
        bit = bool(output[row, col] == BLACK)
        if masking is not None and masking.flips(col, row):
            bit = not bit
        bits.append(bit)
    return np.array(bits, dtype=bool)

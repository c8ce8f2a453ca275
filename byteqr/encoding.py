import logging

import numpy as np
import reedsolo

from .tables import check_version, codewords_length, ecc_length, max_input_length

logger = logging.getLogger(__name__)

BYTE_MODE = 0b0100
PAD_BYTES = (0xEC, 0x11)


def encode_string(content, max_length):
    data = list(content.encode('iso-8859-1', errors='replace'))
    # an empty message would leave the header without a payload byte
    if not data:
        return [0]
    if len(data) > max_length:
        logger.info('Truncating input from %d to %d bytes', len(data), max_length)
        data = data[:max_length]
    return data


def add_informations(data):
    """Prefix the 4-bit mode and 8-bit length, shifting the payload by a nibble.

    The result is one byte longer than header + payload would strictly need:
    the low nibble of the last byte is the terminator.
    """
    length = len(data)
    if length > 0xFF:
        raise ValueError('Byte mode length field holds at most 255 bytes, got {}'.format(length))
    output = [BYTE_MODE << 4 | length >> 4, (length << 4) & 0xFF | data[0] >> 4]
    for i, b in enumerate(data):
        following = data[i + 1] >> 4 if i < length - 1 else 0
        output.append((b << 4) & 0xFF | following)
    return output


def fill_sequence(data, final_length):
    output = list(data)
    for i in range(final_length - len(data)):
        output.append(PAD_BYTES[i % 2])
    return output


def error_correction(codewords, n):
    return list(reedsolo.RSCodec(n).encode(bytes(codewords))[-n:])


def add_error_correction(data, n):
    return list(data) + error_correction(data, n)


def bytes_to_bits(data):
    bits = np.unpackbits(np.array(data, dtype=np.uint8)).astype(bool)
    bits.setflags(write=False)
    return bits


def encode(content, version):
    check_version(version)
    data = encode_string(content, max_input_length(version))
    data = add_informations(data)
    data = fill_sequence(data, codewords_length(version))
    data = add_error_correction(data, ecc_length(version))
    return bytes_to_bits(data)

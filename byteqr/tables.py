import json
import os

# format information is always error correction level L (indicator 01)
EC_LEVEL_L = 0b01
FORMAT_GENERATOR = '10100110111'
FORMAT_MASK = 0b101010000010010

with open(os.path.join(os.path.dirname(__file__), 'versions.json')) as f:
    VERSIONS = {entry['version']: entry for entry in json.load(f)}


class InvalidVersion(ValueError):
    def __init__(self, version):
        super().__init__('Invalid version: {!r} (supported: {}-{})'.format(
            version, min(VERSIONS), max(VERSIONS)))
        self.version = version


def check_version(version):
    if isinstance(version, bool) or not isinstance(version, int) \
            or version not in VERSIONS:
        raise InvalidVersion(version)
    return version


def max_input_length(version):
    return VERSIONS[check_version(version)]['max_input']


def codewords_length(version):
    """Number of data codewords (header, payload and padding)."""
    return VERSIONS[check_version(version)]['codewords']


def ecc_length(version):
    return VERSIONS[check_version(version)]['ecc']


def total_codewords(version):
    return codewords_length(version) + ecc_length(version)


def matrix_size(version):
    return 4 * check_version(version) + 17


def format_bits(mask):
    data = bin(EC_LEVEL_L << 3 | mask)[2:]
    ecc = bin(int(data, 2) << 10)[2:]
    while len(ecc) > 10:
        padded_generator = FORMAT_GENERATOR + '0' * (len(ecc) - len(FORMAT_GENERATOR))
        ecc = bin(int(ecc, 2) ^ int(padded_generator, 2))[2:]
    return (int(data, 2) << 10 | int(ecc, 2)) ^ FORMAT_MASK


def format_sequence(mask):
    """15 booleans, most significant bit first, for ``mask`` in 0..7 at level L."""
    if not 0 <= mask <= 7:
        raise ValueError('Invalid mask: {!r}'.format(mask))
    word = format_bits(mask)
    return [bool(word >> (14 - i) & 1) for i in range(15)]

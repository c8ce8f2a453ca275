import numpy as np
import pytest

from byteqr.encoding import (add_error_correction, add_informations, bytes_to_bits, encode,
                             encode_string, error_correction, fill_sequence)
from byteqr.tables import InvalidVersion, codewords_length, total_codewords


def test_encode_string():
    assert encode_string('AB', 17) == [0x41, 0x42]
    assert encode_string('\xe9', 17) == [0xE9]


def test_encode_string_empty():
    assert encode_string('', 17) == [0]


def test_encode_string_truncates():
    assert encode_string('a' * 20, 17) == [0x61] * 17


def test_encode_string_outside_latin1():
    assert encode_string('€', 17) == [ord('?')]


def test_add_informations():
    assert add_informations([0x41]) == [0x40, 0x14, 0x10]
    assert add_informations([0x41, 0x42]) == [0x40, 0x24, 0x14, 0x20]


def test_add_informations_length_over_15():
    data = [0xFF] * 17
    output = add_informations(data)
    assert len(output) == 19
    assert output[:2] == [0x41, 0x1F]


def test_add_informations_length_limit():
    with pytest.raises(ValueError):
        add_informations([0] * 256)


def test_fill_sequence():
    assert fill_sequence([1, 2], 6) == [1, 2, 0xEC, 0x11, 0xEC, 0x11]
    assert fill_sequence([1, 2, 3], 3) == [1, 2, 3]
    assert fill_sequence([1, 2, 3], 2) == [1, 2, 3]


def test_error_correction():
    # HELLO WORLD, version 1-M
    data = [32, 91, 11, 120, 209, 114, 220, 77, 67, 64, 236, 17, 236, 17, 236, 17]
    ecc = [196, 35, 39, 119, 235, 215, 231, 226, 93, 23]
    assert error_correction(data, 10) == ecc
    assert add_error_correction(data, 10) == data + ecc


def test_bytes_to_bits():
    bits = bytes_to_bits([0x80, 0x01])
    assert bits.dtype == bool
    assert bits.tolist() == [True] + [False] * 14 + [True]
    assert not bits.flags.writeable


def test_encode_single_character():
    bits = encode('A', 1)
    assert len(bits) == 8 * total_codewords(1) == 208
    data = np.packbits(bits).tolist()
    assert data[:3] == [0b0100_0000 | (1 >> 4), 0x14, 0x10]
    assert data[3:codewords_length(1)] == [0xEC, 0x11] * 8
    assert data[codewords_length(1):] == error_correction(data[:codewords_length(1)], 7)


@pytest.mark.parametrize('version', [1, 2, 3, 4])
def test_encode_empty(version):
    bits = encode('', version)
    assert len(bits) == 8 * total_codewords(version)
    assert np.packbits(bits[:24]).tolist() == [0x40, 0x10, 0x00]


@pytest.mark.parametrize('version', [1, 2, 3, 4])
def test_encode_truncation_is_prefix_stable(version):
    head = 'q' * 100
    assert np.array_equal(encode(head + 'abc', version), encode(head + 'xyz', version))
    assert np.array_equal(encode(head, version), encode(head[:80], version))


def test_encode_full_capacity():
    bits = encode('z' * 17, 1)
    data = np.packbits(bits).tolist()
    assert data[:2] == [0x41, 0x17]
    # header, payload and terminator fill the data codewords exactly
    assert data[18] == 0xA0


def test_encode_invalid_version():
    with pytest.raises(InvalidVersion):
        encode('a', 5)

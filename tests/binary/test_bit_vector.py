import pytest

from textbook_rsa.binary import BitVector
from textbook_rsa.protocol_constants import WORD_SIZE


def test_from_int_bit_order():
    """Index 0 holds the least significant bit, str() prints the most significant first."""
    bits = BitVector.from_int(13, 4)
    assert bits.to_bit_array() == [1, 0, 1, 1]
    assert str(bits) == "1101"
    assert len(bits) == 4

def test_from_int_defaults_to_word_size():
    """Without an explicit length the vector spans a native word."""
    bits = BitVector.from_int(5)
    assert len(bits) == WORD_SIZE
    assert bits.to_int() == 5

def test_from_int_accepts_largest_word():
    """A word-sized vector holds every word value."""
    assert BitVector.from_int(2**WORD_SIZE - 1).to_int() == 2**WORD_SIZE - 1

@pytest.mark.parametrize("value,length", [(16, 4), (-1, 4), (1, -1), (2**WORD_SIZE, WORD_SIZE)])
def test_from_int_rejects_invalid_arguments(value, length):
    """Negative arguments and values wider than the length are rejected."""
    with pytest.raises(ValueError):
        BitVector.from_int(value, length)

def test_round_trip_through_int():
    """Converting to int and back reproduces the vector."""
    for value in range(256):
        bits = BitVector.from_int(value, 8)
        assert BitVector.from_int(bits.to_int(), 8) == bits

def test_to_int_rejects_vectors_wider_than_a_word():
    """A vector longer than a word cannot be converted."""
    with pytest.raises(ValueError):
        BitVector([0] * (WORD_SIZE + 1)).to_int()

def test_rejects_non_binary_values():
    """Only 0 and 1 are valid bits."""
    with pytest.raises(ValueError):
        BitVector([0, 1, 2])

def test_copy_is_independent():
    """Copying a vector does not share its buffer."""
    original = BitVector.from_int(0, 4)
    copy = BitVector(original)
    copy.create_iterator().write_next(1)
    assert original.to_int() == 0
    assert copy.to_int() == 1

def test_from_string_single_character():
    """A character's byte is stored least significant bit first."""
    bits = BitVector.from_string("A", 8)
    assert bits.to_bit_array() == [1, 0, 0, 0, 0, 0, 1, 0]
    assert str(bits) == "01000001"

def test_from_string_puts_last_character_lowest():
    """The last character ends up in the lowest byte."""
    bits = BitVector.from_string("AB", 16)
    assert bits.to_int() == 0x4142
    assert str(bits) == "0100000101000010"

def test_from_string_pads_high_bits():
    """Unused high bits of the field are zero."""
    bits = BitVector.from_string("Alice", 48)
    assert len(bits) == 48
    assert int(str(bits), 2) == int.from_bytes(b"Alice", "big")
    assert str(bits).startswith("0" * 8)

@pytest.mark.parametrize("text,length", [("Alice!!", 48), ("A", 7), ("A", -8)])
def test_from_string_rejects_invalid_arguments(text, length):
    """Strings that do not fit and negative lengths are rejected."""
    with pytest.raises(ValueError):
        BitVector.from_string(text, length)

def test_hash_xors_bytes():
    """The hash of two bytes is their XOR."""
    assert BitVector.from_int(0x0102, 16).hash().to_int() == 0x03

def test_hash_wraps_partial_group_by_position():
    """A trailing partial byte is XORed into the low positions of the hash."""
    hashed = BitVector.from_int(0xF0F, 12).hash()
    assert len(hashed) == 8
    assert hashed.to_int() == 0x0F ^ 0x0F

def test_concatenate_places_first_operand_highest():
    """The first operand occupies the high bits and the last one starts at bit 0."""
    a = BitVector.from_int(0b10, 2)
    b = BitVector.from_int(0b011, 3)
    c = BitVector.from_int(0b1, 1)

    result = BitVector.concatenate(a, b, c)

    assert len(result) == 6
    assert str(result) == "10" + "011" + "1"
    assert result.to_int() == 0b100111

def test_concatenate_matches_shifted_sum():
    """Concatenation equals shifting each operand past the ones after it."""
    a, b, c = BitVector.from_int(200, 8), BitVector.from_int(7, 5), BitVector.from_int(1234, 11)
    result = BitVector.concatenate(a, b, c)
    assert result.to_int() == (200 << 16) | (7 << 11) | 1234

def test_concatenate_nothing():
    """Concatenating no vectors gives an empty vector."""
    assert len(BitVector.concatenate()) == 0

def test_forward_cursor_reads_from_lowest_bit():
    """The forward cursor starts at index 0."""
    cursor = BitVector.from_int(0b0110, 4).create_iterator()
    read = []
    while cursor.has_next():
        read.append(cursor.read_next())
    assert read == [0, 1, 1, 0]
    with pytest.raises(IndexError):
        cursor.read_next()

def test_reverse_cursor_reads_from_highest_bit():
    """The reverse cursor starts at the most significant bit and is iterable."""
    assert list(BitVector.from_int(0b0011, 4).create_reverse_iterator()) == [0, 0, 1, 1]

def test_cursor_writes_are_visible_in_vector():
    """Writes through a cursor change the vector that created it."""
    bits = BitVector([0] * 4)
    cursor = bits.create_reverse_iterator()
    cursor.write_next(1)
    assert bits.to_int() == 0b1000
    cursor.set_first(1)
    assert bits.to_int() == 0b1001

def test_cursor_rejects_overrun_and_bad_bits():
    """Writing past the end or writing a non-bit fails."""
    cursor = BitVector([0]).create_iterator()
    with pytest.raises(ValueError):
        cursor.write_next(3)
    cursor.write_next(1)
    with pytest.raises(IndexError):
        cursor.write_next(1)

def test_set_last_sets_top_bit():
    """set_last writes the most significant bit without moving the cursor."""
    bits = BitVector([0] * 5)
    cursor = bits.create_iterator()
    cursor.set_last(1)
    assert bits.to_int() == 16
    assert cursor.read_next() == 0

def test_get_lsb():
    """get_lsb extracts the lowest bit of any integer."""
    assert BitVector.get_lsb(6) == 0
    assert BitVector.get_lsb(7) == 1
    assert BitVector.get_lsb(-3) == 1

def test_equality():
    """Vectors are equal when both length and bits match."""
    assert BitVector.from_int(3, 4) == BitVector([1, 1, 0, 0])
    assert BitVector.from_int(3, 4) != BitVector.from_int(3, 5)

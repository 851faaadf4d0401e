import io

import pytest

from bit_streams import EOF, BitInputStream, BitOutputStream


def test_read_bits_msb_first():
	reader = BitInputStream(b'\xa5\x0f')
	assert reader.read_bits(1) == 1
	assert reader.read_bits(3) == 0b010
	assert reader.read_bits(8) == 0b01010000
	assert reader.read_bits(4) == 0b1111
	assert reader.read_bits(1) == EOF
	assert reader.bits_read == 16


def test_read_past_end_does_not_advance():
	reader = BitInputStream(b'\xff')
	assert reader.read_bits(5) == 0b11111
	assert reader.read_bits(4) == EOF
	assert reader.read_bits(3) == 0b111


def test_reset_rewinds():
	reader = BitInputStream(io.BytesIO(b'hi'))
	assert reader.read_bits(16) == int.from_bytes(b'hi', 'big')
	reader.reset()
	assert reader.bits_read == 0
	assert reader.read_bits(8) == ord('h')


def test_read_32_bits():
	reader = BitInputStream(b'\xfa\xce\x82\x01')
	assert reader.read_bits(32) == 0xFACE8201


def test_read_bits_range():
	with pytest.raises(ValueError):
		BitInputStream(b'\x00').read_bits(0)
	with pytest.raises(ValueError):
		BitInputStream(b'\x00' * 8).read_bits(33)


def test_write_bits_pads_last_byte():
	writer = BitOutputStream()
	writer.write_bits(3, 0b101)
	writer.write_bits(9, 256)
	assert writer.bits_written == 12
	assert writer.getvalue() == bytes([0b10110000, 0b00000000])


def test_write_bits_keeps_low_bits():
	writer = BitOutputStream()
	writer.write_bits(4, 0xAB)
	writer.write_bits(4, -1)
	assert writer.getvalue() == b'\xbf'


def test_close_flushes_to_sink_once():
	sink = io.BytesIO()
	with BitOutputStream(sink) as writer:
		writer.write_bits(8, ord('o'))
		writer.write_bits(1, 1)
	writer.close()
	assert sink.getvalue() == b'o\x80'
	with pytest.raises(ValueError):
		writer.write_bits(1, 0)

import unittest

from huffcodec.bitstream import (
    BitOutputStream,
    BitInputStream,
    pack_bits_to_bytes,
    unpack_bytes_to_bits,
    frame_bits,
    find_body_start,
)
from huffcodec.exceptions import MalformedBitstreamError

class TestBitHelpers(unittest.TestCase):
    def test_pack_bits_pads_right(self):
        self.assertEqual(pack_bits_to_bytes([1, 0, 1]), bytes([0b10100000]))
        self.assertEqual(pack_bits_to_bytes([1, 1, 0, 0, 1, 0, 1, 0]), bytes([0b11001010]))

    def test_unpack_msb_first(self):
        self.assertEqual(unpack_bytes_to_bits(bytes([0b11001010])), [1, 1, 0, 0, 1, 0, 1, 0])

    def test_none_rejected(self):
        with self.assertRaises(ValueError):
            pack_bits_to_bytes(None)
        with self.assertRaises(ValueError):
            unpack_bytes_to_bits(None)

    def test_frame_bits_aligns_to_bytes(self):
        for length in range(1, 20):
            framed = frame_bits([1] * length)
            self.assertEqual(len(framed) % 8, 0)
            self.assertEqual(find_body_start(framed), len(framed) - length)

    def test_frame_bits_always_adds_marker(self):
        self.assertEqual(frame_bits([1] * 7), [0] + [1] * 7)
        self.assertEqual(frame_bits([1] * 8), [0] * 8 + [1] * 8)

    def test_find_body_start_without_data(self):
        with self.assertRaises(MalformedBitstreamError):
            find_body_start([0] * 16)

class TestBitOutputStream(unittest.TestCase):
    def test_finish(self):
        out = BitOutputStream()
        for bit in [1, 0, 1, 0, 1, 0, 1]:
            out.write(bit)
        self.assertEqual(out.finish(), bytes([0b01010101]))

    def test_finish_full_byte_of_body(self):
        out = BitOutputStream()
        out.write_code("11111111")
        self.assertEqual(out.finish(), b"\x00\xff")

    def test_write_byte(self):
        out = BitOutputStream()
        out.write_byte(0x61)
        self.assertEqual(out.bits, [0, 1, 1, 0, 0, 0, 0, 1])
        with self.assertRaises(ValueError):
            out.write_byte(256)

    def test_invalid_bit_write(self):
        out = BitOutputStream()
        with self.assertRaises(ValueError):
            out.write(2)

    def test_invalid_code(self):
        out = BitOutputStream()
        with self.assertRaises(ValueError):
            out.write_code("102")
        with self.assertRaises(ValueError):
            out.write_code([1, 0])

class TestBitInputStream(unittest.TestCase):
    def test_read_skips_framing(self):
        inp = BitInputStream(bytes([0b01010101]))
        bits = [inp.read() for _ in range(8)]
        self.assertEqual(bits, [1, 0, 1, 0, 1, 0, 1, -1])
        self.assertTrue(inp.at_end())

    def test_read_byte(self):
        out = BitOutputStream()
        out.write(1)
        out.write_byte(0xA5)
        inp = BitInputStream(out.finish())
        self.assertEqual(inp.read(), 1)
        self.assertEqual(inp.read_byte(), 0xA5)
        self.assertEqual(inp.remaining(), 0)

    def test_read_byte_truncated(self):
        inp = BitInputStream(bytes([0b00011111]))
        with self.assertRaises(MalformedBitstreamError):
            inp.read_byte()

    def test_empty_or_zero_stream(self):
        with self.assertRaises(MalformedBitstreamError):
            BitInputStream(b"")
        with self.assertRaises(MalformedBitstreamError):
            BitInputStream(b"\x00\x00")

    def test_non_bytes(self):
        with self.assertRaises(ValueError):
            BitInputStream([1, 0])

if __name__ == '__main__':
    unittest.main()

"""
bitstream.py

Bit-level buffers for the compressed format.

Bits are packed most-significant bit first. A finished stream is framed
by a marker bit and zero padding placed ahead of the body, so its length
is a multiple of eight and the body starts at the first set bit.
"""


from typing import Iterable, List

import numpy as np

from .exceptions import MalformedBitstreamError
from .settings import SYMBOL_BITS, MARKER_BIT
from .validators import validate_bit, validate_byte_value, validate_type


def pack_bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack a list of bits (0s and 1s) into a byte stream.

    The last byte is padded with zeros on the right.

    Args:
        bits (List[int]): List of bits.

    Returns:
        bytes: Packed bytes.
    """
    if bits is None:
        raise ValueError("Bits cannot be None")
    return np.packbits(np.asarray(bits, dtype=np.uint8)).tobytes()


def unpack_bytes_to_bits(data: bytes) -> List[int]:
    """
    Unpack a byte stream into a list of bits (MSB first).

    Args:
        data (bytes): The byte stream.

    Returns:
        List[int]: List of bits.
    """
    if data is None:
        raise ValueError("Data cannot be None")
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8)).tolist()


def frame_bits(body: List[int]) -> List[int]:
    """
    Add the marker bit and the zero padding in front of body.

    Between one and eight zero bits are added: the marker plus enough
    padding to reach a byte boundary.
    """
    padding = (SYMBOL_BITS - (len(body) + 1) % SYMBOL_BITS) % SYMBOL_BITS
    return [0] * padding + [MARKER_BIT] + body


def find_body_start(bits: List[int]) -> int:
    """
    Return the index of the first set bit of a framed stream.

    Raises:
        MalformedBitstreamError: If the stream holds no set bit.
    """
    try:
        return bits.index(1)
    except ValueError:
        raise MalformedBitstreamError("Stream holds no data bits") from None


class BitOutputStream:
    """
    Collects bits in memory until the stream is finished.
    """

    def __init__(self) -> None:
        self.bits: List[int] = []

    def write(self, bit: int) -> None:
        """
        Write a single bit (0 or 1) to the stream.

        Raises:
            ValueError: If the bit is not 0 or 1.
        """
        validate_bit(bit)
        self.bits.append(bit)

    def write_code(self, code: str) -> None:
        """Write a code given as a string of '0' and '1' characters."""
        validate_type(code, "Code", str)
        for char in code:
            if char == '1':
                self.bits.append(1)
            elif char == '0':
                self.bits.append(0)
            else:
                raise ValueError(f"Invalid character in code: {char!r}")

    def write_bits(self, bits: Iterable[int]) -> None:
        for bit in bits:
            self.write(bit)

    def write_byte(self, value: int) -> None:
        """Write value as a fixed-width unsigned symbol, MSB first."""
        validate_byte_value(value, "Byte value")
        for shift in range(SYMBOL_BITS - 1, -1, -1):
            self.bits.append((value >> shift) & 1)

    def __len__(self) -> int:
        return len(self.bits)

    def finish(self) -> bytes:
        """
        Frame the collected bits and pack them into bytes.

        Returns:
            bytes: The byte-aligned stream.
        """
        return pack_bits_to_bytes(frame_bits(self.bits))


class BitInputStream:
    """
    Reads bits from a framed byte stream.
    """

    def __init__(self, data: bytes) -> None:
        """
        Unpack data and position the reader on the first bit of the body.

        Args:
            data (bytes): A stream produced by BitOutputStream.finish().

        Raises:
            MalformedBitstreamError: If data holds no body.
        """
        validate_type(data, "Data", bytes)
        self.bits: List[int] = unpack_bytes_to_bits(data)
        self.position: int = find_body_start(self.bits)

    def read(self) -> int:
        """
        Read a single bit from the stream.

        Returns:
            int: 0 or 1 for a valid bit, or -1 if no more bits are available.
        """
        if self.position >= len(self.bits):
            return -1
        bit = self.bits[self.position]
        self.position += 1
        return bit

    def read_byte(self) -> int:
        """
        Read a fixed-width unsigned symbol, MSB first.

        Raises:
            MalformedBitstreamError: If fewer than eight bits remain.
        """
        if self.remaining() < SYMBOL_BITS:
            raise MalformedBitstreamError(
                f"Expected {SYMBOL_BITS} bits for a leaf symbol, {self.remaining()} left")
        value = 0
        for _ in range(SYMBOL_BITS):
            value = (value << 1) | self.bits[self.position]
            self.position += 1
        return value

    def remaining(self) -> int:
        return len(self.bits) - self.position

    def at_end(self) -> bool:
        return self.position >= len(self.bits)

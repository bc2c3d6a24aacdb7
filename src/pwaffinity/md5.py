"""
Pure-Python MD5 (RFC 1321).

MD5 is cryptographically broken and must not be used to protect passwords.
It is provided as a general-purpose checksum only.

The ``MD5`` class follows the ``hashlib`` object interface::

    h = MD5()
    h.update(b"a")
    h.update(b"bc")
    h.hexdigest()  # '900150983cd24fb0d6963f7d28e17f72'
"""

import struct
from typing import Optional, Union

DIGEST_SIZE = 16
BLOCK_SIZE = 64
MASK32 = 0xFFFFFFFF

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# Additive constants, floor(abs(sin(i + 1)) * 2**32)
K = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE, 0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE, 0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA, 0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED, 0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C, 0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05, 0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039, 0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1, 0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

# Left-rotation amounts per round
R = (
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
)


def rotate_left(x: int, n: int) -> int:
    x &= MASK32
    return ((x << n) | (x >> (32 - n))) & MASK32


def _compress(state: tuple, block: bytes) -> tuple:
    """Process one 64-byte block and return the new state."""
    w = struct.unpack("<16I", block)
    a, b, c, d = state

    for j in range(64):
        if j < 16:
            f = (b & c) | (~b & d)
            g = j
        elif j < 32:
            f = (d & b) | (~d & c)
            g = (5 * j + 1) % 16
        elif j < 48:
            f = b ^ c ^ d
            g = (3 * j + 5) % 16
        else:
            f = c ^ (b | (~d & MASK32))
            g = (7 * j) % 16
        f &= MASK32
        a, b, c, d = d, (b + rotate_left(a + f + K[j] + w[g], R[j])) & MASK32, b, c

    return (
        (state[0] + a) & MASK32,
        (state[1] + b) & MASK32,
        (state[2] + c) & MASK32,
        (state[3] + d) & MASK32,
    )


def _padding(message_length: int) -> bytes:
    """0x80, zeros up to 56 mod 64, then the bit length as 64-bit LE."""
    zeros = (55 - message_length) % BLOCK_SIZE
    bit_length = (message_length * 8) & 0xFFFFFFFFFFFFFFFF
    return b"\x80" + b"\x00" * zeros + struct.pack("<Q", bit_length)


def _to_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    # memoryview raises TypeError for objects without the buffer protocol
    return bytes(memoryview(data))


class MD5:
    """Incremental MD5 hash object."""

    name = "md5"
    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: Optional[Union[bytes, str]] = None):
        self._state = INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data is not None:
            self.update(data)

    def update(self, data: Union[bytes, bytearray, memoryview, str]) -> None:
        data = self._buffer + _to_bytes(data)
        self._length += len(data) - len(self._buffer)
        whole = len(data) - len(data) % BLOCK_SIZE
        state = self._state
        for offset in range(0, whole, BLOCK_SIZE):
            state = _compress(state, data[offset:offset + BLOCK_SIZE])
        self._state = state
        self._buffer = data[whole:]

    def digest(self) -> bytes:
        tail = self._buffer + _padding(self._length)
        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + BLOCK_SIZE])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> 'MD5':
        other = MD5()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def md5_digest(message: Union[bytes, str]) -> bytes:
    """16-byte MD5 digest of ``message``."""
    return MD5(message).digest()


def md5_hexdigest(message: Union[bytes, str]) -> str:
    """MD5 digest of ``message`` as 32 lowercase hex characters."""
    return MD5(message).hexdigest()


def md5_file(path: str, chunk_size: int = 4096) -> str:
    """Hex MD5 of a file, read in chunks."""
    h = MD5()
    with open(path, "rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            h.update(chunk)
    return h.hexdigest()

# filename: bit_streams.py

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

EOF = -1


class BitInputStream:
    """Sequential MSB-first reader over a byte source.

    ``source`` may be bytes-like or a binary file object; a file is read in
    full up front so that ``reset`` can rewind it.
    """

    def __init__(self, source):
        if hasattr(source, "read"):
            source = source.read()
        self._bits = bitarray(endian="big")
        self._bits.frombytes(bytes(source))
        self._pos = 0

    @property
    def bits_read(self):
        return self._pos

    def read_bits(self, n):
        """Return the next ``n`` bits as an unsigned int, or EOF if fewer remain."""
        if n < 1 or n > 32:
            raise ValueError(f"can only read 1 to 32 bits at a time, not {n}")
        end = self._pos + n
        if end > len(self._bits):
            return EOF
        if n == 1:
            value = self._bits[self._pos]
        else:
            value = ba2int(self._bits[self._pos:end])
        self._pos = end
        return value

    def reset(self):
        self._pos = 0


class BitOutputStream:
    def __init__(self, sink=None):
        self._bits = bitarray(endian="big")
        self._sink = sink
        self._closed = False

    @property
    def bits_written(self):
        return len(self._bits)

    def write_bits(self, n, value):
        # Only the low n bits of value are kept
        if n < 1 or n > 32:
            raise ValueError(f"can only write 1 to 32 bits at a time, not {n}")
        if self._closed:
            raise ValueError("write to closed BitOutputStream")
        self._bits.extend(int2ba(value & ((1 << n) - 1), length=n, endian="big"))

    def getvalue(self):
        # tobytes() zero-pads the final partial byte
        return self._bits.tobytes()

    def close(self):
        if self._closed:
            return
        if self._sink is not None:
            self._sink.write(self.getvalue())
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

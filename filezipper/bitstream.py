# Returned by BitReader.read_bit once the byte source is used up.
END_OF_DATA = -1


class BitWriter:
    """
    Packs single bits MSB-first into bytes and writes them to ``out``,
    any binary stream with a ``write`` method.
    """
    def __init__(self, out):
        self.out = out
        self.buffer = 0
        self.bit_count = 0
        self.bits_written = 0

    def write_bit(self, bit):
        if bit not in (0, 1):
            raise ValueError(f"Bit must be 0 or 1, got {bit!r}")
        self.buffer = (self.buffer << 1) | bit
        self.bit_count += 1
        self.bits_written += 1

        if self.bit_count == 8:
            self.out.write(bytes((self.buffer,)))
            self.buffer = 0
            self.bit_count = 0

    def write_code(self, code):
        """Writes a code given as a string of '0' and '1' characters."""
        for bit in code:
            if bit == "1":
                self.write_bit(1)
            elif bit == "0":
                self.write_bit(0)
            else:
                raise ValueError(f"Invalid character {bit!r} in code {code!r}")

    def flush(self):
        # Shift the pending bits up so the zero padding sits on the low side
        if self.bit_count > 0:
            self.buffer <<= 8 - self.bit_count
            self.out.write(bytes((self.buffer,)))
            self.buffer = 0
            self.bit_count = 0


class BitReader:
    """Reads single bits MSB-first from ``source``, a readable binary stream."""
    def __init__(self, source):
        self.source = source
        self.buffer = 0
        self.bit_count = 0

    def read_bit(self):
        if self.bit_count == 0:
            chunk = self.source.read(1)
            if not chunk:
                return END_OF_DATA
            self.buffer = chunk[0]
            self.bit_count = 8

        bit = (self.buffer >> 7) & 1
        self.buffer = (self.buffer << 1) & 0xFF
        self.bit_count -= 1
        return bit

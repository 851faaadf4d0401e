# filename: huffman_errors.py


class HuffmanError(Exception):
    """Base class for everything the compressor raises on bad input."""


class InvalidMagicError(HuffmanError):
    pass


class MalformedHeaderError(HuffmanError):
    pass


class TruncatedStreamError(HuffmanError):
    pass


class UnencodableSymbolError(HuffmanError):
    # Only reachable if the code table was not built from the same input
    pass


class CountOverflowError(HuffmanError):
    # A byte count too large for the 32-bit counts header
    pass

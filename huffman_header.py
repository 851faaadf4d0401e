# filename: huffman_header.py

import enum

from bit_streams import EOF
from huffman_core import (
    ALPH_SIZE,
    BITS_PER_INT,
    PSEUDO_EOF,
    SYMBOL_BITS,
    HuffmanInternal,
    HuffmanLeaf,
    HuffmanLogic,
)
from huffman_errors import CountOverflowError, InvalidMagicError, MalformedHeaderError

HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1
HUFF_COUNTS = HUFF_NUMBER | 2

# 257 leaves can be at most 256 levels deep
MAX_TREE_DEPTH = ALPH_SIZE


class HeaderFormat(enum.Enum):
    TREE = HUFF_TREE
    COUNTS = HUFF_COUNTS

    @property
    def magic(self):
        return self.value


def write_tree(node, writer):
    """Pre-order: leaf -> 1 + 9-bit symbol, internal -> 0, left, right."""
    if node.is_leaf:
        writer.write_bits(1, 1)
        writer.write_bits(SYMBOL_BITS, node.symbol)
        return
    writer.write_bits(1, 0)
    write_tree(node.left, writer)
    write_tree(node.right, writer)


def read_tree(reader):
    symbols = []
    root = _read_node(reader, 0, symbols)
    if len(set(symbols)) != len(symbols):
        raise MalformedHeaderError("tree has more than one leaf for a symbol")
    if PSEUDO_EOF not in symbols:
        raise MalformedHeaderError("tree has no end-of-stream leaf")
    return root


def _read_node(reader, depth, symbols):
    if depth > MAX_TREE_DEPTH:
        raise MalformedHeaderError(f"tree nested deeper than {MAX_TREE_DEPTH} levels")
    flag = reader.read_bits(1)
    if flag == EOF:
        raise MalformedHeaderError("header ended in the middle of the tree")
    if flag == 1:
        symbol = reader.read_bits(SYMBOL_BITS)
        if symbol == EOF:
            raise MalformedHeaderError("header ended in the middle of a leaf")
        if symbol > PSEUDO_EOF:
            raise MalformedHeaderError(f"leaf symbol {symbol} out of range")
        symbols.append(symbol)
        return HuffmanLeaf(symbol)
    left = _read_node(reader, depth + 1, symbols)
    right = _read_node(reader, depth + 1, symbols)
    return HuffmanInternal(left, right, weight=0)


def write_counts(freqs, writer):
    for symbol, freq in enumerate(freqs):
        if freq >> BITS_PER_INT:
            raise CountOverflowError(f"count {freq} for symbol {symbol} does not fit in 32 bits")
        writer.write_bits(BITS_PER_INT, freq)


def read_counts(reader):
    freqs = []
    for symbol in range(ALPH_SIZE):
        freq = reader.read_bits(BITS_PER_INT)
        if freq == EOF:
            raise MalformedHeaderError(f"count table ended at symbol {symbol}")
        freqs.append(freq)
    return freqs


def write_header(root, freqs, writer, header_format=HeaderFormat.TREE):
    writer.write_bits(BITS_PER_INT, header_format.magic)
    if header_format is HeaderFormat.TREE:
        write_tree(root, writer)
    else:
        write_counts(freqs, writer)


def read_header(reader, logic=None):
    """Check the magic and return the code tree it introduces."""
    magic = reader.read_bits(BITS_PER_INT)
    if magic == EOF:
        raise InvalidMagicError("input too short to hold a magic number")
    try:
        header_format = HeaderFormat(magic)
    except ValueError:
        raise InvalidMagicError(f"unknown magic number {magic:#010x}") from None

    if header_format is HeaderFormat.TREE:
        return read_tree(reader)
    return (logic or HuffmanLogic()).build_tree(read_counts(reader))

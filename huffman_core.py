# filename: huffman_core.py

import heapq
import itertools
from collections import Counter

from bit_streams import EOF
from huffman_errors import TruncatedStreamError, UnencodableSymbolError

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE
SYMBOL_BITS = 9


class HuffmanNode:
    is_leaf = False

    def __init__(self, weight):
        self.weight = weight


class HuffmanLeaf(HuffmanNode):
    is_leaf = True

    def __init__(self, symbol, weight=0):
        super().__init__(weight)
        self.symbol = symbol

    def __repr__(self):
        return f"HuffmanLeaf({self.symbol!r}, {self.weight!r})"


class HuffmanInternal(HuffmanNode):
    def __init__(self, left, right, weight=None):
        if weight is None:
            weight = left.weight + right.weight
        super().__init__(weight)
        self.left = left
        self.right = right

    def __repr__(self):
        return f"HuffmanInternal({self.left!r}, {self.right!r})"


class HuffmanLogic:
    def count_frequencies(self, reader):
        # Consumes the reader; the caller rewinds it before encoding
        freqs = Counter(iter(lambda: reader.read_bits(BITS_PER_WORD), EOF))
        return [freqs[symbol] for symbol in range(ALPH_SIZE)]

    def build_tree(self, freqs):
        """Build the code tree for a 256-entry frequency table.

        Ties on weight are broken by insertion order: leaves go in by symbol
        value, PSEUDO_EOF last, and every merged node takes the next number.
        The first node popped becomes the left child, so equal tables always
        produce the same tree.
        """
        order = itertools.count()
        priority_queue = [
            (freq, next(order), HuffmanLeaf(symbol, freq))
            for symbol, freq in enumerate(freqs)
            if freq
        ]
        priority_queue.append((1, next(order), HuffmanLeaf(PSEUDO_EOF, 1)))
        heapq.heapify(priority_queue)

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            _, _, left = heapq.heappop(priority_queue)
            _, _, right = heapq.heappop(priority_queue)
            merged = HuffmanInternal(left, right)
            heapq.heappush(priority_queue, (merged.weight, next(order), merged))

        return priority_queue[0][2]

    def generate_codes(self, root):
        # A lone leaf root (empty input) still needs one bit per symbol
        if root.is_leaf:
            return {root.symbol: "0"}

        codes = {}
        stack = [(root, "")]
        while stack:
            node, current_code = stack.pop()
            if node.is_leaf:
                codes[node.symbol] = current_code
            else:
                stack.append((node.right, current_code + "1"))
                stack.append((node.left, current_code + "0"))
        return codes

    def encode_stream(self, reader, codes, writer):
        count = 0
        while True:
            byte = reader.read_bits(BITS_PER_WORD)
            if byte == EOF:
                break
            self._write_code(codes, byte, writer)
            count += 1
        self._write_code(codes, PSEUDO_EOF, writer)
        return count

    def _write_code(self, codes, symbol, writer):
        code = codes.get(symbol)
        if not code:
            raise UnencodableSymbolError(f"no code for symbol {symbol}")
        # Deep trees can yield codes longer than one write_bits call allows
        for start in range(0, len(code), BITS_PER_INT):
            chunk = code[start:start + BITS_PER_INT]
            writer.write_bits(len(chunk), int(chunk, 2))

    def decode_stream(self, root, reader, writer):
        count = 0
        current = root
        while True:
            bit = reader.read_bits(1)
            if bit == EOF:
                raise TruncatedStreamError(
                    f"payload ended after {count} bytes without end-of-stream code"
                )
            if not current.is_leaf:
                current = current.right if bit else current.left
            if current.is_leaf:
                if current.symbol == PSEUDO_EOF:
                    return count
                writer.write_bits(BITS_PER_WORD, current.symbol)
                count += 1
                current = root

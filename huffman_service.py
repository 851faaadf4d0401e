# // filename: huffman_service.py

import io
import logging

from bit_streams import BitInputStream, BitOutputStream
from huffman_core import HuffmanLogic
from huffman_header import HeaderFormat, read_header, write_header

logger = logging.getLogger(__name__)


class HuffmanService:
    def __init__(self, header_format=HeaderFormat.TREE):
        self.logic = HuffmanLogic()
        self.header_format = header_format

    def compress_stream(self, reader, writer):
        # Two passes over the input: count, then rewind and encode
        freqs = self.logic.count_frequencies(reader)
        tree = self.logic.build_tree(freqs)
        codes = self.logic.generate_codes(tree)
        logger.debug("built code tree with %d symbols", len(codes))

        write_header(tree, freqs, writer, self.header_format)
        header_bits = writer.bits_written

        reader.reset()
        count = self.logic.encode_stream(reader, codes, writer)
        logger.debug(
            "encoded %d bytes: %d header bits, %d payload bits",
            count, header_bits, writer.bits_written - header_bits,
        )
        return count

    def decompress_stream(self, reader, writer):
        tree = read_header(reader, self.logic)
        count = self.logic.decode_stream(tree, reader, writer)
        logger.debug("decoded %d bytes", count)
        return count

    def compress(self, data):
        writer = BitOutputStream()
        self.compress_stream(BitInputStream(data), writer)
        return writer.getvalue()

    def decompress(self, data):
        writer = BitOutputStream()
        self.decompress_stream(BitInputStream(data), writer)
        return writer.getvalue()

    def compress_file(self, src, dst):
        with open(src, "rb") as fi:
            reader = BitInputStream(fi)
        # Output is built in memory so a failure leaves dst untouched
        buffer = io.BytesIO()
        with BitOutputStream(buffer) as writer:
            count = self.compress_stream(reader, writer)
        with open(dst, "wb") as fo:
            fo.write(buffer.getvalue())
        logger.info("compressed %s (%d bytes) to %s", src, count, dst)
        return count

    def decompress_file(self, src, dst):
        with open(src, "rb") as fi:
            reader = BitInputStream(fi)
        buffer = io.BytesIO()
        with BitOutputStream(buffer) as writer:
            count = self.decompress_stream(reader, writer)
        with open(dst, "wb") as fo:
            fo.write(buffer.getvalue())
        logger.info("decompressed %s to %s (%d bytes)", src, dst, count)
        return count

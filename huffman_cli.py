#!/usr/bin/env python3
"""
Command-line front end for the Huffman compressor.

Run with:
    huffman compress FILE [OUT] [--header tree|counts]
    huffman decompress FILE.hf [OUT]
"""
import argparse
import logging
import os
import sys

from huffman_errors import HuffmanError
from huffman_header import HeaderFormat
from huffman_service import HuffmanService

SUFFIX = ".hf"

logger = logging.getLogger(__name__)


def default_output(src, command):
    if command == "compress":
        return src + SUFFIX
    if src.endswith(SUFFIX) and len(src) > len(SUFFIX):
        return src[:-len(SUFFIX)]
    return src + ".out"


def build_parser():
    parser = argparse.ArgumentParser(
        prog="huffman", description="Lossless Huffman compression of any file"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    comp = sub.add_parser("compress", help="compress SRC")
    comp.add_argument("src")
    comp.add_argument("dst", nargs="?", default=None, help=f"default: SRC{SUFFIX}")
    comp.add_argument(
        "--header",
        choices=[fmt.name.lower() for fmt in HeaderFormat],
        default=HeaderFormat.TREE.name.lower(),
        help="store the code tree (default) or the raw byte counts",
    )

    decomp = sub.add_parser("decompress", help="decompress SRC")
    decomp.add_argument("src")
    decomp.add_argument(
        "dst", nargs="?", default=None, help=f"default: SRC without {SUFFIX}"
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    dst = args.dst or default_output(args.src, args.command)
    try:
        if args.command == "compress":
            service = HuffmanService(HeaderFormat[args.header.upper()])
            service.compress_file(args.src, dst)
            original_size = os.path.getsize(args.src)
            compressed_size = os.path.getsize(dst)
            print(f"Original size:   {original_size} bytes")
            print(f"Compressed size: {compressed_size} bytes")
            if original_size > 0:
                print(f"Ratio = {100.0 * compressed_size / original_size:6.2f}%")
        else:
            HuffmanService().decompress_file(args.src, dst)
    except (HuffmanError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

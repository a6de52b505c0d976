"""Encode files to ATGC symbols and decode them back."""

import argparse
import sys
from typing import List, Optional

import yaml

from ATGCCoder.config import CodecConfig
from ATGCCoder.errors import ATGCError
from ATGCCoder.interface.decoder import Decoder
from ATGCCoder.interface.encoder import Encoder
from ATGCCoder.utils.io import read_bytes, write_bytes, write_text
from ATGCCoder.utils.logging import get_logger
from ATGCCoder.utils.timing import timing_context

STDIN = "-"


def wrap_symbols(symbols: str, width: int) -> str:
    """Splits symbols into lines of at most width characters (0: one line)."""
    if width <= 0 or not symbols:
        return symbols
    return "\n".join(symbols[i:i + width] for i in range(0, len(symbols), width))


def strip_line_breaks(text: str) -> str:
    return text.replace("\r", "").replace("\n", "")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atgc",
        description="Encode binary data as ATGC symbols and decode it back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a file
  atgc encode data.bin -o data.atgc

  # Encode a literal string, wrapped at 60 symbols per line
  atgc encode --string "hello" --line-width 60

  # Decode back to the original bytes
  atgc decode data.atgc -o data.bin

  # Decode and print as UTF-16 text
  atgc decode message.atgc --text --encoding utf-16
"""
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Encode bytes to symbols")
    encode_parser.add_argument(
        "input",
        type=str,
        help="Input file path ('-' for stdin), or text with --string"
    )
    encode_parser.add_argument(
        "--string",
        action="store_true",
        help="Treat INPUT as a literal string to encode"
    )
    encode_parser.add_argument(
        "--line-width",
        type=int,
        default=None,
        help="Symbols per output line (default: from config, 0 = no wrapping)"
    )

    decode_parser = subparsers.add_parser("decode", help="Decode symbols to bytes")
    decode_parser.add_argument(
        "input",
        type=str,
        help="Symbol file path ('-' for stdin)"
    )
    decode_parser.add_argument(
        "--text",
        action="store_true",
        help="Write the decoded bytes as text in --encoding"
    )

    for sub in (encode_parser, decode_parser):
        sub.add_argument(
            "-o", "--output",
            type=str,
            default=None,
            help="Output file path (default: stdout)"
        )
        sub.add_argument(
            "--encoding",
            type=str,
            default=None,
            help="Text encoding for strings (default: from config, utf-8)"
        )
        sub.add_argument(
            "--config",
            type=str,
            default=None,
            help="Path to a YAML configuration file"
        )
        sub.add_argument(
            "-v", "--verbose",
            action="store_true",
            help="Enable debug logging"
        )

    return parser


def load_config(args: argparse.Namespace) -> CodecConfig:
    config = CodecConfig.from_yaml(args.config) if args.config else CodecConfig()
    overrides = {}
    if args.encoding:
        overrides["text_encoding"] = args.encoding
    if getattr(args, "line_width", None) is not None:
        overrides["line_width"] = args.line_width
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    if overrides:
        config = CodecConfig.from_dict({**config.to_dict(), **overrides})
    return config


def run_encode(args: argparse.Namespace, config: CodecConfig) -> None:
    encoder = Encoder(config)
    if args.string:
        symbols = encoder.encode_string(args.input)
    elif args.input == STDIN:
        symbols = encoder.encode(sys.stdin.buffer.read())
    else:
        symbols = encoder.encode_file(args.input)

    output = wrap_symbols(symbols, config.line_width)
    if args.output:
        write_text(args.output, output + "\n")
        get_logger().info(f"Wrote {len(symbols)} symbols to {args.output}")
    else:
        sys.stdout.write(output + "\n")


def run_decode(args: argparse.Namespace, config: CodecConfig) -> None:
    decoder = Decoder(config)
    if args.input == STDIN:
        raw = sys.stdin.buffer.read()
    else:
        raw = read_bytes(args.input)
    symbols = strip_line_breaks(raw.decode("latin-1"))

    if args.text:
        text = decoder.decode_string(symbols)
        if args.output:
            write_text(args.output, text, encoding=config.text_encoding)
        else:
            sys.stdout.write(text)
        return

    data = decoder.decode(symbols)
    if args.output:
        write_bytes(args.output, data)
        get_logger().info(f"Wrote {len(data)} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(data)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger()

    try:
        config = load_config(args)
        logger.set_level(config.log_level)
        with timing_context(args.command if args.verbose else None):
            if args.command == "encode":
                run_encode(args, config)
            else:
                run_decode(args, config)
    except (ATGCError, OSError, ValueError, yaml.YAMLError) as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

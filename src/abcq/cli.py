"""abcq: encode, decode and generate bijective base-N ids from the shell.

Usage:
    abcq [--chars CHARS] <command> [args...]

Commands:
    encode <int>...       Encode integers
    decode <str>...       Decode strings back to integers
    generate [-n N]       Print the next N ids starting after --counter

Environment:
    ABCQ_CHARS      Alphabet to use (default: a-z then A-Z)
    ABCQ_COUNTER    Counter to start generating after (default: -1)
"""

import argparse
import json
import logging
import os
import sys

from abcq.core.alphabet import DEFAULT_ALPHABET
from abcq.core.codec import BijectiveCodec
from abcq.core.config import START_COUNTER, chars_from_text

ENV_CHARS = "ABCQ_CHARS"
ENV_COUNTER = "ABCQ_COUNTER"


def fail(message):
    print(f"ERROR: {message}", file=sys.stderr)
    sys.exit(1)


def apply_env_defaults(args):
    """Fill --chars and --counter from the environment when not given."""
    if args.chars is None:
        args.chars = os.environ.get(ENV_CHARS, DEFAULT_ALPHABET)
    if args.counter is None:
        raw = os.environ.get(ENV_COUNTER)
        if raw is None:
            args.counter = START_COUNTER
        else:
            try:
                args.counter = int(raw)
            except ValueError:
                fail(f"{ENV_COUNTER} must be an integer, got {raw!r}")


def build_codec(args) -> BijectiveCodec:
    """Build a codec from parsed arguments. Exits on bad configuration."""
    chars = chars_from_text(args.chars, args.separator)
    try:
        return BijectiveCodec(chars=chars, counter=args.counter)
    except (TypeError, ValueError) as e:
        fail(str(e))


def emit(args, pairs):
    """Print (input, output) pairs as tab-separated lines or JSON.

    A single pair prints the output alone. Failed conversions (None) are
    left out of text output and reported by the caller.
    """
    if args.json:
        print(json.dumps([{"input": a, "output": b} for a, b in pairs],
                         ensure_ascii=False))
        return
    for a, b in pairs:
        if b is None:
            continue
        if len(pairs) == 1:
            print(b)
        else:
            print(f"{a}\t{b}")


# ---- Commands ----

def cmd_encode(args):
    codec = build_codec(args)
    pairs = [(i, codec.encode(i)) for i in args.numbers]
    emit(args, pairs)
    bad = [i for i, s in pairs if s is None]
    if bad:
        fail(f"cannot encode negative numbers: {', '.join(map(str, bad))}")


def cmd_decode(args):
    codec = build_codec(args)
    pairs = [(s, codec.decode(s)) for s in args.strings]
    emit(args, pairs)
    bad = [s for s, i in pairs if i is None]
    if bad:
        fail(f"symbols outside the alphabet in: {', '.join(map(repr, bad))}")


def cmd_generate(args):
    if args.count < 0:
        fail(f"count must be >= 0, got {args.count}")
    codec = build_codec(args)
    ids = [codec.generate() for _ in range(args.count)]
    if args.json:
        print(json.dumps({"ids": ids, "counter": codec.counter}, ensure_ascii=False))
        return
    for s in ids:
        print(s)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="abcq",
        description="Bijective base-N encoder for short sequential ids",
    )
    parser.add_argument("--chars", default=None,
                        help="Alphabet, one symbol per character (default: a-zA-Z)")
    parser.add_argument("--separator", default=None,
                        help="Split --chars on this string for multi-character symbols")
    parser.add_argument("--counter", type=int, default=None,
                        help="Counter to generate after (default: -1)")
    parser.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    # encode
    p_encode = sub.add_parser("encode", help="Encode integers")
    p_encode.add_argument("numbers", nargs="+", type=int, help="Integers to encode")

    # decode
    p_decode = sub.add_parser("decode", help="Decode strings")
    p_decode.add_argument("strings", nargs="+", help="Strings to decode")

    # generate
    p_generate = sub.add_parser("generate", help="Generate sequential ids")
    p_generate.add_argument("-n", "--count", type=int, default=1,
                            help="How many ids to generate (default: 1)")

    args = parser.parse_args(argv)
    apply_env_defaults(args)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "generate": cmd_generate,
    }

    commands[args.command](args)


if __name__ == "__main__":
    main()

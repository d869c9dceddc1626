"""passgen command-line interface.

Usage examples:
    passgen generate
    passgen generate -n 12 --no-symbols -c 5
    passgen strength 4 8 12 16
"""

import argparse
import logging
import sys

from passgen import (
    MAX_LENGTH,
    CharacterClass,
    EmptyPool,
    GenerationRequest,
    InvalidInput,
    classify_strength,
    generate_password,
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords and rate their strength.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    gen_p.add_argument(
        "-n", "--length", type=int, default=MAX_LENGTH,
        help=f"Password length (default: {MAX_LENGTH})",
    )
    gen_p.add_argument(
        "--max-length", type=int, default=MAX_LENGTH,
        help=f"Largest length accepted (default: {MAX_LENGTH})",
    )
    gen_p.add_argument("--no-uppercase", action="store_true")
    gen_p.add_argument("--no-lowercase", action="store_true")
    gen_p.add_argument("--no-numbers", action="store_true")
    gen_p.add_argument("--no-symbols", action="store_true")
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )

    # ── strength ───────────────────────────────────────────────────────
    strength_p = sub.add_parser(
        "strength", help="Show the strength rating for password lengths",
    )
    strength_p.add_argument("lengths", nargs="+", type=int)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "strength":
        return _cmd_strength(args)

    parser.print_help()
    return 0


def _enabled_classes(args: argparse.Namespace) -> set[CharacterClass]:
    disabled = {
        CharacterClass.UPPERCASE: args.no_uppercase,
        CharacterClass.LOWERCASE: args.no_lowercase,
        CharacterClass.NUMBERS: args.no_numbers,
        CharacterClass.SYMBOLS: args.no_symbols,
    }
    return {cls for cls, off in disabled.items() if not off}


def _cmd_generate(args: argparse.Namespace) -> int:
    if args.count < 1:
        print(f"Error: count must be at least 1, got {args.count}", file=sys.stderr)
        return 1

    try:
        request = GenerationRequest(
            args.length, _enabled_classes(args), max_length=args.max_length,
        )
        for _ in range(args.count):
            pwd = generate_password(request)
            print(f"  {pwd}  ({pwd.strength.label or 'Unrated'})")
    except EmptyPool:
        print("Error: select at least one character class", file=sys.stderr)
        return 1
    except InvalidInput as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


def _cmd_strength(args: argparse.Namespace) -> int:
    for length in args.lengths:
        try:
            rating = classify_strength(length)
        except InvalidInput as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"  {length:>3}  {rating.label or 'Unrated'}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

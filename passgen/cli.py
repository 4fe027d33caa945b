"""passgen command-line interface.

Usage examples:
    python -m passgen generate
    python -m passgen generate -n 20 -c 5 --no-symbols
    python -m passgen score -n 16
"""

import argparse
import logging
import sys

from passgen import (
    DEFAULT_CONFIG,
    Configuration,
    GenerationError,
    estimate_entropy,
    generate,
    score,
)


def _add_config_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-n", "--length", type=int, default=DEFAULT_CONFIG.length,
        help=f"Password length (default: {DEFAULT_CONFIG.length})",
    )
    p.add_argument("--no-uppercase", action="store_true")
    p.add_argument("--no-lowercase", action="store_true")
    p.add_argument("--no-digits", action="store_true")
    p.add_argument("--no-symbols", action="store_true")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate random passwords from selected character sets.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # ── generate ───────────────────────────────────────────────────────
    gen_p = sub.add_parser("generate", help="Generate passwords")
    _add_config_args(gen_p)
    gen_p.add_argument(
        "-c", "--count", type=int, default=1,
        help="Number of passwords to generate (default: 1)",
    )

    # ── score ──────────────────────────────────────────────────────────
    score_p = sub.add_parser(
        "score", help="Rate a configuration without generating",
    )
    _add_config_args(score_p)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        return _cmd_generate(args)
    if args.command == "score":
        return _cmd_score(args)

    parser.print_help()
    return 0


def _config_from_args(args: argparse.Namespace) -> Configuration:
    return Configuration(
        length=args.length,
        upper=not args.no_uppercase,
        lower=not args.no_lowercase,
        digits=not args.no_digits,
        symbols=not args.no_symbols,
    )


def _cmd_generate(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    report = score(config)
    entropy = estimate_entropy(config)

    for _ in range(args.count):
        try:
            pwd = generate(config)
        except GenerationError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(f"  {pwd}  ({report.label.value}, {entropy} bits)")

    return 0


def _cmd_score(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    report = score(config)

    filled = report.value
    bar = "#" * filled + "-" * (6 - filled)
    print(f"  Strength: [{bar}] {report.label.value} ({report.value}/6)")
    print(f"  Color:    {report.color.name.lower()} ({report.color.value})")
    print(f"  Entropy:  {estimate_entropy(config)} bits")
    if not config.classes:
        print("  ! At least one option must be selected.", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging
import sys

from . import Rejected, recognize


def run_sentence(source) -> int:
    outcome = recognize(source)
    if isinstance(outcome, Rejected):
        print(str(outcome), file=sys.stderr)
        return 1
    print(outcome.message)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ll1-recognizer",
        description=(
            "Check a sentence of the language (a|b)* '.', e.g. 'a b a .'. "
            "Spaces between symbols are ignored."
        ),
    )
    parser.add_argument(
        "symbols",
        nargs="*",
        help="Sentence given as arguments (joined by spaces). Read from stdin if omitted.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log recognizer decisions to stderr.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    source = " ".join(args.symbols) if args.symbols else sys.stdin
    return run_sentence(source)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

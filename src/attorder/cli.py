"""Command line interface: ``attorder --order id,class,on.* FILE...``"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .order import OrderSettings
from .parser import parse
from .serialize import to_test_format
from .tokens import ParseError, PatternError

logger = logging.getLogger(__name__)

ORDER_ENV_VAR = "ATTORDER_ORDER"


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="attorder",
        description="Reorder the attributes of HTML and template tags.",
    )
    parser.add_argument(
        "--order",
        action="append",
        default=None,
        metavar="PATTERNS",
        help=(
            "Comma separated list of regular expressions in the order the attributes should appear. "
            f"May be given more than once. Defaults to ${ORDER_ENV_VAR}."
        ),
    )
    parser.add_argument(
        "--write", "-w",
        action="store_true",
        help="Write the result back to each file instead of printing it",
    )
    parser.add_argument(
        "--stdio",
        action="store_true",
        help="Read from stdin and write to stdout",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the parsed node tree instead of the rewritten markup",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Files to process")
    return parser


def order_patterns(values, environ=None):
    """Split ``--order`` values (or the environment default) into patterns.

    Empty entries are dropped, so ``--order ""`` means no patterns.
    """
    if values is None:
        environ = os.environ if environ is None else environ
        value = environ.get(ORDER_ENV_VAR, "")
        values = [value] if value else []
    patterns = []
    for value in values:
        patterns.extend(pattern for pattern in value.split(",") if pattern)
    return patterns


def render(source, settings, debug=False):
    document = parse(source, settings)
    if debug:
        return to_test_format(document) + "\n"
    return document.to_html()


def process_file(path, settings, write=False, debug=False, stdout=None):
    stdout = stdout or sys.stdout
    with path.open(encoding="utf-8", newline="") as f:
        result = render(f, settings, debug=debug)
    if write and not debug:
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(result)
        logger.info("rewrote %s", path)
    else:
        stdout.write(result)


def main(argv=None, stdin=None, stdout=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    settings = OrderSettings(order_patterns(args.order))

    # A bad pattern is a usage error, it would fail every remaining file too.
    if args.stdio:
        try:
            stdout.write(render(stdin, settings, debug=args.debug))
        except PatternError as exc:
            logger.error("%s", exc)
            return 2
        except (OSError, UnicodeDecodeError, ParseError) as exc:
            logger.error("<stdin>: %s", exc)
            return 1
        return 0

    failed = 0
    for path in args.files:
        try:
            process_file(path, settings, write=args.write, debug=args.debug, stdout=stdout)
        except PatternError as exc:
            logger.error("%s: %s", path, exc)
            return 2
        except (OSError, UnicodeDecodeError, ParseError) as exc:
            logger.error("%s: %s", path, exc)
            failed += 1
    if failed:
        logger.warning("%d of %d files failed", failed, len(args.files))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

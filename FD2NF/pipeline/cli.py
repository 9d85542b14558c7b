"""Command-line entry point: analyze dependencies given as text and print the response as JSON.

Usage::

    fd2nf "{a}->{b,c,d}, {b,c}->{a,d}, {d}->{b}"
    echo "{a,d}->{b,c}, {d}->{b}" | fd2nf --indent 2
"""

import argparse
import sys
from typing import List, Optional

from FD2NF.pipeline.worker import handle_request
from FD2NF.utils.logging import setup_logging_from_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fd2nf",
        description="Closures, candidate keys, normal forms and minimal cover of a set of functional dependencies",
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Dependencies such as '{a,b}->{c}, {c}->{d}'; read from stdin when omitted",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent the JSON output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Returns 0 when the analysis succeeded and 1 otherwise."""
    args = build_parser().parse_args(argv)
    setup_logging_from_config()

    text = args.text if args.text is not None else sys.stdin.read()
    response = handle_request(text)
    print(response.model_dump_json(by_alias=True, indent=args.indent))
    return 0 if response.successful else 1


if __name__ == "__main__":
    sys.exit(main())

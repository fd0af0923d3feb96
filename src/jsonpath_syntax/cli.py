from __future__ import annotations

import argparse
import logging
import sys
import traceback
from typing import List, Optional

from lark import logger as lark_logger

from .api import parse_tree
from .config import BACKENDS, debug_enabled, resolve_backend
from .errors import PathSyntaxError
from .lower import lower


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="jsonpath-syntax", description="Parse a JSONPath expression")
    ap.add_argument("expression", nargs="?", help="Path expression (defaults to stdin)")
    ap.add_argument("-b", "--backend", choices=BACKENDS, help="Parser backend (default: $JSONPATH_SYNTAX_BACKEND or rd)")
    ap.add_argument("--tree", action="store_true", help="Print the parse tree")
    ap.add_argument("--canonical", action="store_true", help="Print the canonical path text")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    debug = debug_enabled()

    if debug:
        lark_logger.setLevel(logging.DEBUG)

    source = args.expression if args.expression is not None else sys.stdin.read().rstrip("\n")

    try:
        tree = parse_tree(source, resolve_backend(args.backend))
    except (PathSyntaxError, ValueError) as exc:
        print(f"Parse error: {exc}", file=sys.stderr)
        if debug:
            traceback.print_exc(file=sys.stderr)
        return 1

    if args.tree:
        print(tree.pretty(), end="")
        return 0

    path = lower(tree)
    print(str(path) if args.canonical else repr(path))
    return 0

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser

from lisper import __version__
from lisper.config import get_log_level


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="lisper", description="A barebones LISP-family interpreter")
    parser.add_argument("file", nargs="?", help="source file to run; starts the REPL when omitted")
    parser.add_argument("--max-depth", type=int, default=None, help="maximum evaluator recursion depth")
    parser.add_argument("--serve", action="store_true", help="run the JSON-lines TCP REPL server")
    parser.add_argument("--host", default=None, help="REPL server host")
    parser.add_argument("--port", type=int, default=None, help="REPL server port")
    parser.add_argument("--log-level", default=None, help="logging level (default: LISPER_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or get_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.max_depth is not None and args.max_depth <= 0:
        print("--max-depth must be positive", file=sys.stderr)
        return 2

    if args.serve:
        from lisper.repl_server import ReplServer
        ReplServer(args.host, args.port, max_depth=args.max_depth).serve_forever()
        return 0

    from lisper.repl import run_file, run_repl
    if args.file:
        return run_file(args.file, max_depth=args.max_depth)
    return run_repl(max_depth=args.max_depth)


if __name__ == "__main__":
    sys.exit(main())

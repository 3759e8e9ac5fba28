# mdcompile/cli.py
"""
Command line entry point.

    mdcompile docs/guide.md -r lib/MyLib.dll --verbose
    mdcompile docs/            # every markdown file below docs/

Exit status is 0 when every group was skipped or compiled cleanly, 1 otherwise.
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .compile import CSharpCompiler
from .core import check_file, format_directive_error, format_document_failure, format_group_error
from .errors import CompilerUnavailableError, DirectiveSyntaxError
from .utils.fs import find_markdown_files


def _existing_path(value: str) -> str:
    if not os.path.exists(value):
        raise argparse.ArgumentTypeError(f"path does not exist: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdcompile",
        description="Compile the C# code blocks embedded in markdown documents.",
    )
    parser.add_argument("path", type=_existing_path, help="Markdown file, or a directory to search for *.md files")
    parser.add_argument(
        "-r", "--reference", "--ref",
        dest="references",
        action="append",
        default=[],
        metavar="PATH",
        help="Reference assembly passed to the compiler (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress and synthesized sources")
    parser.add_argument("--compiler", default=None, help="Compiler command (default: $MDCOMPILE_CSC, csc, mcs)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> logging.Logger:
    lg = logging.getLogger("mdcompile.cli")
    if verbose:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        lg.addHandler(handler)
        lg.setLevel(logging.DEBUG)
        lg.propagate = False
    return lg


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help/--version exit 0; usage errors map to 1.
        return 0 if not e.code else 1

    lg = _configure_logging(args.verbose)
    documents = find_markdown_files(args.path)
    ok = True

    try:
        with CSharpCompiler(args.compiler, logger=lg if args.verbose else None) as compiler:
            for path in documents:
                report = check_file(
                    path,
                    compiler,
                    reference_paths=args.references,
                    logger=lg if args.verbose else None,
                )
                for outcome in report.failures:
                    for line in format_group_error(path, outcome):
                        print(line, file=sys.stderr)
                if not report.ok:
                    print(format_document_failure(path), file=sys.stderr)
                    ok = False
    except DirectiveSyntaxError as e:
        print(format_directive_error(e), file=sys.stderr)
        return 1
    except CompilerUnavailableError as e:
        print(f"{args.path} : error MDC0005: {e}", file=sys.stderr)
        return 1
    finally:
        if args.verbose:
            for handler in list(lg.handlers):
                lg.removeHandler(handler)

    return 0 if ok else 1

#!/usr/bin/env python3
"""
CLI for the booklang interpreter.

Usage:
    python -m booklang run [FILE] [--config FILE] [--banner] [-v]
    python -m booklang check FILE [--config FILE] [--json] [-v]

Examples:
    # Run a program file
    python -m booklang run examples/hello.book

    # Run a program from stdin (the whole input is read before execution)
    cat examples/hello.book | python -m booklang run

    # Check block structure and statement syntax without running
    python -m booklang check examples/hello.book --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .checker import check_program
from .config import resolve_config
from .errors import BookError
from .runtime.interpreter import Interpreter
from .source import SourceProgram


def _print_line(text: str) -> None:
    print(text, flush=True)


def _read_program(file_arg) -> SourceProgram:
    if file_arg is None or file_arg == '-':
        return SourceProgram.from_stream(sys.stdin, '<stdin>')
    return SourceProgram.from_file(file_arg)


def cmd_run(args) -> int:
    """Run a program file, or stdin."""
    if args.file not in (None, '-') and not Path(args.file).exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    try:
        config = resolve_config(args.config)
    except BookError as e:
        print(e.diagnostic.format(), file=sys.stderr)
        return 1

    reading_stdin = args.file in (None, '-')
    if args.banner or (reading_stdin and sys.stdin.isatty()):
        print(config.banner)

    program = _read_program(args.file)
    interpreter = Interpreter(config, sink=_print_line)
    try:
        interpreter.run(program)
    except BookError as e:
        print(e.diagnostic.format(), file=sys.stderr)
        return 1
    return 0


def cmd_check(args) -> int:
    """Check a program file for structural errors."""
    source_path = Path(args.file)
    if not source_path.exists():
        print(f"Error: File not found: {source_path}", file=sys.stderr)
        return 1

    try:
        config = resolve_config(args.config)
    except BookError as e:
        print(e.diagnostic.format(), file=sys.stderr)
        return 1

    program = SourceProgram.from_file(source_path)
    result = check_program(program, config)

    if args.json:
        print(json.dumps(result.to_json(), indent=2))
    elif result.diagnostics:
        for diag in result.diagnostics:
            print(diag.format())
        print(f"\n{len(result.errors)} error(s), {len(result.warnings)} warning(s)")
    else:
        print(f"OK: {source_path.name} - {len(program)} line(s), no errors")

    return 1 if result.has_errors else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m booklang',
        description='booklang interpreter',
    )
    # Options shared by every subcommand, accepted after the subcommand name
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-v', '--verbose', action='store_true',
                        help='Log execution details to stderr')
    common.add_argument('-c', '--config', metavar='FILE',
                        help='YAML configuration file (default: $BOOKLANG_CONFIG)')

    subparsers = parser.add_subparsers(dest='action', required=True)

    run_parser = subparsers.add_parser('run', parents=[common], help='Run a program')
    run_parser.add_argument('file', nargs='?', help='Program file (default: stdin)')
    run_parser.add_argument('--banner', action='store_true',
                            help='Print the startup banner even when not interactive')

    check_parser = subparsers.add_parser('check', parents=[common], help='Check a program for errors')
    check_parser.add_argument('file', help='Program file')
    check_parser.add_argument('--json', action='store_true',
                              help='Print diagnostics as JSON')

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if args.action == 'run':
        return cmd_run(args)
    elif args.action == 'check':
        return cmd_check(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())

# lalib/cli/main.py
import argparse
import sys

from lalib.cli import env
from lalib.cli import logging as logging_cli
from lalib.cli import matrix as matrix_cli


def build_parser():
    parser = argparse.ArgumentParser(
        prog="lalib",
        description="Linear Algebra Library: enter, transpose and multiply integer matrices",
        epilog="Use --env-file PATH (repeatable) to load LALIB_* settings from a file.",
    )
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("menu", help="Interactive matrix session (default)")

    matrix_parser = subparsers.add_parser("matrix", help="One-shot operations on matrix files")
    matrix_subparsers = matrix_parser.add_subparsers(dest="subcommand", required=True)
    matrix_cli.register_subcommands(matrix_subparsers)

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)

    return parser


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    env_files, argv = env.extract_env_files(argv)
    if env_files:
        env.load_env_files(env_files)

    args = build_parser().parse_args(argv)

    if args.command in (None, "menu"):
        # imported late so its logger picks up --env-file settings
        from lalib.cli.menu import run_menu

        run_menu()
    elif args.command == "matrix":
        status = matrix_cli.dispatch(args)
        if status:
            sys.exit(status)
    elif args.command == "logging":
        logging_cli.dispatch(args)

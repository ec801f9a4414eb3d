"""Command-line helpers for one-shot matrix operations on files.

Each subcommand loads matrices from text files (see
:mod:`lalib.io.matrix_file`), runs the engine and prints the result one row
per line.
"""

from lalib.config import load_settings
from lalib.io.matrix_file import load_matrix
from lalib.logging import get_logger
from lalib.matrix.engine import can_multiply, multiply, transpose
from lalib.matrix.errors import DimensionMismatchError
from lalib.matrix.render import render


def register_subcommands(subparsers):
    """Attach matrix subcommands to an ``argparse`` parser.

    Parameters
    ----------
    subparsers : :class:`argparse._SubParsersAction`
        The ``argparse`` subparsers object to which matrix commands will be
        registered.

    Examples
    --------
    >>> import argparse
    >>> parser = argparse.ArgumentParser(prog="lalib matrix")
    >>> subparsers = parser.add_subparsers(dest="subcommand", required=True)
    >>> register_subcommands(subparsers)
    >>> args = parser.parse_args(["multiply", "a.txt", "b.txt"])
    >>> args.first, args.second
    ('a.txt', 'b.txt')
    """

    show_parser = subparsers.add_parser("show", help="Print a matrix file")
    show_parser.add_argument("file")

    transpose_parser = subparsers.add_parser("transpose", help="Transpose a matrix file")
    transpose_parser.add_argument("file")

    multiply_parser = subparsers.add_parser(
        "multiply", help="Multiply FIRST by SECOND, in that order"
    )
    multiply_parser.add_argument("first")
    multiply_parser.add_argument("second")


def _print_matrix(matrix):
    delimiter = load_settings().delimiter
    for line in render(matrix, delimiter):
        print(line)


def dispatch(args):
    """Execute the matrix command for ``args.subcommand``.

    Returns the process exit status: ``0`` on success, ``1`` when a file
    could not be read or decoded, a setting is invalid, or the operation is
    undefined. Matrix errors and undecodable files are both ``ValueError``.
    """

    logger = get_logger(__file__)

    try:
        if args.subcommand == "show":
            _print_matrix(load_matrix(args.file))
        elif args.subcommand == "transpose":
            _print_matrix(transpose(load_matrix(args.file)))
        elif args.subcommand == "multiply":
            first = load_matrix(args.first)
            second = load_matrix(args.second)
            if not can_multiply(first, second):
                raise DimensionMismatchError(first.shape, second.shape)
            _print_matrix(multiply(first, second))
        else:
            logger.error("No handler for subcommand: %s", args.subcommand)
            return 1
    except (ValueError, OSError) as exc:
        logger.error("matrix %s failed: %s", args.subcommand, exc)
        print(f"Error: {exc}")
        return 1
    return 0

import argparse
import types

from lalib.cli import matrix as matrix_cli


def _parser():
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers(dest="subcommand", required=True)
    matrix_cli.register_subcommands(subparsers)
    return parser


def test_register_subcommands_parses_multiply():
    args = _parser().parse_args(["multiply", "a.txt", "b.txt"])
    assert args.subcommand == "multiply"
    assert args.first == "a.txt"
    assert args.second == "b.txt"


def test_register_subcommands_parses_show():
    args = _parser().parse_args(["show", "a.txt"])
    assert args.file == "a.txt"


def test_dispatch_show_unset_file_reports_error(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("\n")
    status = matrix_cli.dispatch(types.SimpleNamespace(subcommand="show", file=str(path)))
    assert status == 1
    assert "Error:" in capsys.readouterr().out


def test_dispatch_unknown_subcommand():
    assert matrix_cli.dispatch(types.SimpleNamespace(subcommand="invert")) == 1

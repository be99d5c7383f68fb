from unittest import mock

from cub3d.cli import EXIT_FAILURE, EXIT_SUCCESS, main
from cub3d.parsing import EXTENSION_MESSAGE, PARAMETERS_MESSAGE


def test_valid_map_succeeds(capsys):
    assert main(["map.cub"]) == EXIT_SUCCESS
    assert capsys.readouterr().err == ""


def test_missing_argument_fails(capsys):
    assert main([]) == EXIT_FAILURE
    assert capsys.readouterr().err == f"Error\n{PARAMETERS_MESSAGE}\n"


def test_bad_extension_fails(capsys):
    assert main(["map.txt"]) == EXIT_FAILURE
    assert capsys.readouterr().err == f"Error\n{EXTENSION_MESSAGE}\n"


def test_reads_sys_argv_when_none(capsys):
    with mock.patch("sys.argv", ["cub3d", "level.cub"]):
        assert main() == EXIT_SUCCESS
    with mock.patch("sys.argv", ["cub3d"]):
        assert main() == EXIT_FAILURE
    assert capsys.readouterr().err.startswith("Error\n")
import io

import pytest

from netspan.cli import main, run
from netspan.network import InvalidInputError

TRIANGLE = "3\n3\n0 1 1\n1 2 2\n0 2 5\n"


def test_path_printed():
    assert run(TRIANGLE + "0 2\n") == "0 1 2 \n"


def test_non_positive_size():
    assert run("0\n") == "Invalid Input\n"


def test_invalid_connection():
    assert run("2 1 0 5 1 0 1") == "Invalid input.\n"


def test_disconnected_network():
    assert run("3 1 0 1 1 0 2") == "No spanning tree available.\n"


def test_invalid_endpoint():
    assert run("2 1 0 1 1 0 7") == "Invalid input.\n"


def test_same_endpoints():
    assert run("2 1 0 1 1 1 1") == "1\n"


def test_truncated_input_raises():
    with pytest.raises(InvalidInputError):
        run("3 2 0 1")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TRIANGLE + "2 0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "2 1 0 \n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 x"))
    assert main([]) == 1
    assert "netspan:" in capsys.readouterr().err
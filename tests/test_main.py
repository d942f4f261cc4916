import pytest

from fraction import Fraction
from main import build_parser, main, sum_reciprocals


@pytest.fixture(autouse=True)
def _logger(reset_logger):
    yield


def test_sum_reciprocals():
    assert sum_reciprocals(2, 20) == Fraction(197698279, 77597520)
    assert str(sum_reciprocals(1, 4)) == "11/6"
    assert str(sum_reciprocals(5, 5)) == "0/1"


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert (args.start, args.stop, args.base, args.exp, args.verbose) == (2, 20, None, 1, False)


def test_main_prints_sum(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("sum = 197698279/77597520 (2.5477")


def test_main_prints_power(capsys):
    assert main(["--stop", "3", "--base", "1", "3", "--exp", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "sum = 1/2 (0.5)"
    assert lines[1] == f"1/3 ** 5 = 1/243 ({1.0 / 243.0})"


def test_main_verbose_logs_steps(capsys):
    assert main(["--stop", "4", "-v"]) == 0
    err = capsys.readouterr().err
    assert "after 1/3: 5/6" in err


@pytest.mark.parametrize(
    "argv",
    [
        ["--base", "2", "1", "--exp", "200"],
        ["--base", "2", "1", "--exp", "-1"],
    ],
)
def test_main_reports_failures(capsys, argv):
    assert main(argv) == 1
    assert "Error" in capsys.readouterr().err


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        main(["--base", "1"])

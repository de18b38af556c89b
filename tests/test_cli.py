import pytest

from parsim.cli import format_result, main, parse_args
from parsim.simulation import simulate


def test_parse_args_reads_all_values():
    args = parse_args(["1", "2.5", "3", "10", "4"])
    assert (args.seed, args.side, args.ncside, args.n_part, args.time_steps) == (1, 2.5, 3, 10, 4)


def test_parse_args_accepts_negative_seed():
    args = parse_args(["-5", "1", "2", "10", "1"])
    assert args.seed == -5


@pytest.mark.parametrize("argv", [[], ["1", "2", "3", "4"], ["1", "2", "3", "4", "5", "6"]])
def test_parse_args_wrong_count_exits(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code != 0


def test_parse_args_rejects_non_numbers():
    with pytest.raises(SystemExit):
        parse_args(["one", "2", "3", "4", "5"])


def test_format_result_uses_three_decimals():
    assert format_result(1.23456, 2.0, 7) == "1.235 2.000\n7\n"


def test_main_prints_simulation_result(capsys):
    assert main(["1", "2", "3", "10", "2"]) == 0
    out, err = capsys.readouterr()
    assert out == format_result(*simulate(1, 2.0, 3, 10, 2))
    assert err.endswith("s\n")


def test_main_reports_invalid_parameters(capsys):
    assert main(["1", "2", "0", "10", "2"]) == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert "ncside" in err


def test_main_output_has_two_lines(capsys):
    main(["-3", "1", "4", "25", "1"])
    out, _ = capsys.readouterr()
    position, collisions = out.splitlines()
    x, y = (float(v) for v in position.split())
    assert 0 <= x <= 1 and 0 <= y <= 1
    assert int(collisions) >= 0
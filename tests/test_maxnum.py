import io

import pytest

from circuitsim.maxnum import find_max, main


@pytest.mark.parametrize(
    "numbers, expected",
    [([1.0, 2.0, 3.0], 3.0), ([3.0, 2.0, 1.0], 3.0), ([-1.5, 7.25, 0.0], 7.25), ([-4.0, -2.0, -9.0], -2.0)],
)
def test_find_max(numbers, expected):
    assert find_max(numbers) == expected


def test_result_is_member_and_upper_bound():
    numbers = [0.5, -3.0, 12.0, 4.0]
    result = find_max(numbers)
    assert result in numbers
    assert all(result >= n for n in numbers)


def test_accepts_generator():
    assert find_max(x for x in (5, 9, 2)) == 9


def test_empty_rejected():
    with pytest.raises(ValueError):
        find_max([])


def test_main_prints_max(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 11 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Max number is: 11\n"


def test_main_rejects_too_few(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 11\n"))
    assert main([]) == 1
    assert "Invalid input data" in capsys.readouterr().err


def test_main_rejects_non_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 x 2\n"))
    assert main([]) == 1
    assert "Invalid input data" in capsys.readouterr().err
import pytest

from pattern_drills.calculators import countdown, fibonacci, reverse_digits
from pattern_drills.cli import main
from pattern_drills.patterns import floyd_pyramid, pascal_triangle


def _run(capsys, *argv):
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_countdown_prints_one_per_line(capsys):
    code, out = _run(capsys, "countdown", "4")
    assert code == 0
    assert out.splitlines() == [str(v) for v in countdown(4)]


def test_calc_result(capsys):
    code, out = _run(capsys, "calc", "2", "+", "3", "*", "4")
    assert code == 0
    assert out == "Result: 20\n"


def test_calc_division_by_zero(capsys):
    code, out = _run(capsys, "calc", "1", "/", "0", "+", "1")
    assert code == 1
    assert out == "Error: Division by zero is not allowed!\n"


def test_calc_invalid_operator(capsys):
    code, out = _run(capsys, "calc", "1", "%", "2", "+", "1")
    assert code == 1
    assert out == "Error: Invalid operator! Use only +, -, *, or /\n"


def test_permutation_error(capsys):
    code, out = _run(capsys, "permutation", "3", "5")
    assert code == 1
    assert out == "Error: r cannot be greater than n\n"


def test_power_prefix(capsys):
    code, out = _run(capsys, "power", "7", "0")
    assert code == 0
    assert out == "power is : 1\n"


def test_profit_break_even(capsys):
    code, out = _run(capsys, "profit", "5", "5")
    assert code == 0
    assert out == "you have not made a profit and lose\n"


def test_profit_loss_lines(capsys):
    code, out = _run(capsys, "profit", "9", "4")
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "you made a loss"
    assert lines[1].startswith("you have loss of : ")
    assert int(lines[1].rsplit(" ", 1)[1]) + 4 == 9


def test_grade_out_of_range(capsys):
    code, out = _run(capsys, "grade", "150")
    assert code == 1
    assert out == "Error: Not a correct input\n"


@pytest.mark.parametrize(
    "n,expected",
    [
        ("7", "7 is a prime number.\n"),
        ("9", "9 is a composite number.\n"),
        ("1", "Not a prime and not a composite number\n"),
    ],
)
def test_prime(capsys, n, expected):
    code, out = _run(capsys, "prime", n)
    assert code == 0
    assert out == expected


def test_reverse_sum(capsys):
    code, out = _run(capsys, "reverse-sum", "123")
    reversed_value = reverse_digits(123)
    assert code == 0
    assert out.splitlines() == [str(reversed_value), f"Total number of sum is : {123 + reversed_value}"]


def test_fibonacci_line(capsys):
    code, out = _run(capsys, "fibonacci", "10")
    assert code == 0
    assert out == f"fibonacci of  10 is : {fibonacci(10)}\n"


@pytest.mark.parametrize("name,draw", [("pyramid", floyd_pyramid), ("pascal", pascal_triangle)])
def test_pattern_matches_library(capsys, name, draw):
    code, out = _run(capsys, "pattern", name, "4")
    assert code == 0
    assert out.splitlines() == draw(4)


def test_sort_default_values(capsys):
    code, out = _run(capsys, "sort")
    assert code == 0
    assert out.splitlines() == [
        "Before sorting: 6 3 2 0 4 7 ",
        "After sorting: 0 2 3 4 6 7 ",
    ]


def test_sort_selection_is_ordered(capsys):
    code, out = _run(capsys, "sort", "--algorithm", "selection", "5", "1", "4")
    after = out.splitlines()[1].removeprefix("After sorting: ").split()
    assert code == 0
    assert [int(v) for v in after] == sorted([5, 1, 4])


def test_bad_integer_exits():
    with pytest.raises(SystemExit):
        main(["countdown", "abc"])
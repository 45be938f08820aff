import pytest

from circuitsim.circuit import Circuit
from circuitsim.truthtable import (
    TruthTable,
    find_expression,
    load_truth_table,
    parse_file_name,
    parse_truth_table,
    synthesize_minterm,
)

XOR_LINES = ["0 0 0", "0 1 1", "1 0 1", "1 1 0"]
MAJORITY_LINES = [
    "0 0 0 0",
    "0 0 1 0",
    "0 1 0 0",
    "0 1 1 1",
    "1 0 0 0",
    "1 0 1 1",
    "1 1 0 1",
    "1 1 1 1",
]


def test_parse_rows_match_input():
    table = parse_truth_table(XOR_LINES)
    assert table.rows == tuple(
        tuple(int(word) for word in line.split()) for line in XOR_LINES
    )
    assert table.width == 3


def test_parse_skips_blank_lines():
    table = parse_truth_table(["", "0 1", "   ", "1 0"])
    assert table.rows == ((0, 1), (1, 0))


def test_parse_stops_at_non_integer():
    table = parse_truth_table(["1 1 # comment"])
    assert table.rows == ((1, 1),)


def test_parse_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_truth_table(["0 1 1", "1 0"])


def test_empty_table():
    table = parse_truth_table([])
    assert table.rows == ()
    assert table.width == 0
    assert table.format() == ""


def test_format_lines_round_trip():
    table = parse_truth_table(XOR_LINES)
    text = table.format()
    assert parse_truth_table(text.splitlines()) == table
    assert text.count("\n") == len(table.rows)


def test_format_trailing_space_per_value():
    assert TruthTable(((0, 1),)).format() == "0 1 \n"


def test_load_truth_table(tmp_path):
    path = tmp_path / "table.txt"
    path.write_text("\n".join(MAJORITY_LINES) + "\n", encoding="utf-8")
    assert load_truth_table(path) == parse_truth_table(MAJORITY_LINES)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_truth_table(tmp_path / "absent.txt")


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"table.txt"', "table.txt"),
        ('   "dir/table.txt"  ', "dir/table.txt"),
        ("table.txt", "table.txt"),
    ],
)
def test_parse_file_name(text, expected):
    assert parse_file_name(text) == expected


def test_synthesize_minterm():
    assert synthesize_minterm([1, 0, 1]) == "(a & !b & c)"


def test_minterm_negates_each_zero():
    inputs = [0, 1, 0, 0, 1]
    term = synthesize_minterm(inputs)
    assert term.count("!") == inputs.count(0)
    assert term.startswith("(") and term.endswith(")")


def test_find_expression_without_ones():
    table = parse_truth_table(["0 0 0", "1 1 0"])
    assert find_expression(table) == '"'


def test_find_expression_terms_match_true_rows():
    table = parse_truth_table(MAJORITY_LINES)
    expr = find_expression(table)
    assert expr.startswith('"') and expr.endswith('"')
    true_rows = [row for row in table.rows if row[-1] == 1]
    assert expr.count(" | ") == len(true_rows) - 1
    for row in true_rows:
        assert synthesize_minterm(row[:-1]) in expr


@pytest.mark.parametrize("lines", [XOR_LINES, MAJORITY_LINES])
def test_found_expression_reproduces_table(lines):
    table = parse_truth_table(lines)
    inputs = tuple(chr(ord("a") + i) for i in range(table.width - 1))
    circuit = Circuit(name="found", arguments=inputs, expr=find_expression(table))
    circuit.validate()
    for row in table.rows:
        assert circuit.run(row[:-1]) == row[-1]
import io

import pytest

from circuitsim.circuit import parse_definition
from circuitsim.cli import Simulator, main
from circuitsim.truthtable import find_expression, load_truth_table

AND_DEF = 'and1(a, b) "a & b"'
MIX_DEF = 'mix(a, b, c) "!(a | b) & c"'


@pytest.fixture
def sim():
    return Simulator(out=io.StringIO(), err=io.StringIO())


def out_of(sim):
    return sim._out.getvalue()


def err_of(sim):
    return sim._err.getvalue()


def test_exit_stops(sim):
    assert sim.execute("EXIT") is False
    assert sim.execute("PRINT") is True


def test_define_and_print(sim):
    sim.execute(f"DEFINE {AND_DEF}")
    sim.execute(f"DEFINE {MIX_DEF}")
    sim.execute("PRINT")
    assert out_of(sim).splitlines() == [AND_DEF, MIX_DEF]
    assert len(sim.storage) == 2


def test_define_duplicate_reported(sim):
    sim.execute(f"DEFINE {AND_DEF}")
    sim.execute('DEFINE and1(x, y) "x | y"')
    assert "already exist. Skip DEFINE command." in err_of(sim)
    assert sim.storage.find("and1").expr == '"a & b"'


def test_define_invalid_operand(sim):
    sim.execute('DEFINE bad(a, b) "a & z"')
    assert "Invalid expression entered. Skip DEFINE command." in err_of(sim)
    assert "bad" not in sim.storage


@pytest.mark.parametrize("values", [(0, 0), (0, 1), (1, 0), (1, 1)])
def test_run_matches_circuit(sim, values):
    sim.execute(f"DEFINE {AND_DEF}")
    sim.execute(f"RUN and1({values[0]}, {values[1]})")
    expected = parse_definition(AND_DEF).run(values)
    assert out_of(sim) == f"{expected}\n"


def test_run_unknown_circuit(sim):
    sim.execute("RUN nope(1, 0)")
    assert "Circuit with name nope does NOT exist." in err_of(sim)
    assert out_of(sim) == ""


def test_run_invalid_argument(sim):
    sim.execute(f"DEFINE {AND_DEF}")
    sim.execute("RUN and1(1, x)")
    assert "Invalid argument parsed for RUN command" in err_of(sim)
    assert out_of(sim) == ""


def test_all_lists_every_combination(sim):
    sim.execute(f"DEFINE {MIX_DEF}")
    sim.execute("ALL mix")
    lines = out_of(sim).splitlines()
    circuit = parse_definition(MIX_DEF)
    rows = list(circuit.truth_rows())
    assert lines[0] == f"Execute mix {circuit.expr}"
    assert len(lines) == len(rows) + 1
    for line, (values, result) in zip(lines[1:], rows):
        *inputs, res = line.split(" | ")
        assert tuple(int(v) for v in inputs) == values
        assert res == f"res: {result}"


def test_all_unknown_circuit(sim):
    sim.execute("ALL ghost")
    assert "Skip ALL command." in err_of(sim)


def test_find_prints_table_and_expression(sim, tmp_path):
    path = tmp_path / "xor.txt"
    path.write_text("0 0 0\n0 1 1\n1 0 1\n1 1 0\n", encoding="utf-8")
    sim.execute(f'FIND "{path}"')
    table = load_truth_table(path)
    lines = out_of(sim).splitlines()
    assert lines[-1] == find_expression(table)
    assert len(lines) == len(table.rows) + 1


def test_find_missing_file(sim, tmp_path):
    sim.execute(f'FIND "{tmp_path / "missing.txt"}"')
    assert "Skip FIND command." in err_of(sim)
    assert out_of(sim) == ""


def test_unknown_command_is_ignored(sim):
    assert sim.execute("HELLO world") is True
    assert out_of(sim) == "" and err_of(sim) == ""


def test_main_reads_until_exit(monkeypatch, capsys):
    script = f"DEFINE {AND_DEF}\nRUN and1(1, 1)\nEXIT\nPRINT\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("Console simulator of Digital Integrated Circuits")
    assert captured.count("Enter command: ") == 3
    assert AND_DEF not in captured
    assert f"{parse_definition(AND_DEF).run((1, 1))}\n" in captured
import pytest

from conftest import pigeonhole
from dpllsat.cli import main
from dpllsat.dimacs import write_dimacs
from dpllsat.formula import make_formula


@pytest.fixture
def cnf_file(tmp_path):
    def _write(num_vars, formula, name="problem.cnf"):
        path = tmp_path / name
        with open(path, "w") as stream:
            write_dimacs(num_vars, make_formula(formula), stream)
        return str(path)
    return _write


def test_sat_output(cnf_file, capsys):
    path = cnf_file(3, [[1], [-2]])
    assert main([path]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["SAT", "Variable 1 = true", "Variable 2 = false", "Variable 3 = false"]


def test_unsat_output(cnf_file, capsys):
    num_vars, formula = pigeonhole(2, 1)
    assert main([cnf_file(num_vars, formula)]) == 0
    assert capsys.readouterr().out == "UNSAT\n"


@pytest.mark.parametrize("engine", ["recursive", "iterative", "trail"])
@pytest.mark.parametrize("branching", ["lowest", "random", "occurrence"])
def test_engines_and_policies(cnf_file, capsys, engine, branching):
    path = cnf_file(3, [[1, -2], [2, 3]])
    assert main([path, "--engine", engine, "--branching", branching, "--seed", "3", "--verify"]) == 0
    assert capsys.readouterr().out.startswith("SAT\n")


def test_stats_block(cnf_file, capsys):
    assert main([cnf_file(2, [[1, 2], [-1, -2]]), "--stats"]) == 0
    out = capsys.readouterr().out
    assert "## Statistics" in out
    assert "# Decisions: 1" in out


@pytest.mark.parametrize("argv", [[], ["a.cnf", "b.cnf"], ["a.cnf", "--engine", "parallel"]])
def test_usage_errors_exit_1(argv, capsys):
    assert main(argv) == 1
    assert "usage:" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.cnf")]) == 1
    assert capsys.readouterr().out.startswith("Error: ")


def test_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.cnf"
    path.write_text("p cnf two 1\n1 0\n")
    assert main([str(path)]) == 1
    assert "Invalid header" in capsys.readouterr().out


def test_strict_reads_zero_line_as_empty_clause(tmp_path, capsys):
    path = tmp_path / "trailer.cnf"
    path.write_text("p cnf 1 1\n1 0\n0\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.startswith("SAT")
    assert main([str(path), "--strict"]) == 0
    assert capsys.readouterr().out == "UNSAT\n"


def test_timeout_reported_as_error(cnf_file, capsys):
    num_vars, formula = pigeonhole(4, 3)
    assert main([cnf_file(num_vars, formula), "--timeout", "1e-9"]) == 1
    assert "time limit" in capsys.readouterr().out


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "binary.cnf"
    path.write_bytes(b"p cnf 1 1\n\xff\xfe 0\n")
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: ")
    assert "not a text file" in out

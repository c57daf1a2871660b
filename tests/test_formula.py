import pytest

from dpllsat.errors import InvalidClauseError
from dpllsat.formula import (assign_literal, check_formula, evaluate_clause, get_literal,
                             get_opposite_literal, get_variable, has_empty_clause, is_negative,
                             make_clause, make_formula, polarities, unit_clauses,
                             verify_model)


class TestLiteralIndex:
    def test_positive_and_negative_index(self):
        assert get_literal(3) == 6
        assert get_literal(-3) == 5

    def test_round_trip_to_variable(self):
        for v in (1, 2, 7):
            assert get_variable(get_literal(v)) == v
            assert get_variable(get_literal(-v)) == v

    def test_opposite_and_sign(self):
        assert get_opposite_literal(get_literal(4)) == get_literal(-4)
        assert get_opposite_literal(get_literal(-4)) == get_literal(4)
        assert is_negative(get_literal(-2))
        assert not is_negative(get_literal(2))

    def test_zero_rejected(self):
        with pytest.raises(InvalidClauseError):
            get_literal(0)


class TestMakeFormula:
    def test_duplicates_dropped_in_order(self):
        assert make_clause([3, -1, 3, 2, -1]) == (3, -1, 2)

    def test_zero_literal_rejected(self):
        with pytest.raises(InvalidClauseError):
            make_formula([[1, 0, 2]])

    def test_check_formula_range(self):
        formula = make_formula([[1, -2], [3]])
        check_formula(formula, 3)
        with pytest.raises(InvalidClauseError) as excinfo:
            check_formula(formula, 2)
        assert excinfo.value.literal == 3


class TestAssignLiteral:
    def test_satisfied_clauses_dropped_and_opposite_stripped(self):
        formula = make_formula([[1, -2], [-1, 3], [2, 3], [-1]])
        assert assign_literal(formula, 1, True) == ((3,), (2, 3), ())

    def test_false_value(self):
        formula = make_formula([[1, -2], [-1, 3], [2, 3]])
        assert assign_literal(formula, 1, False) == ((-2,), (2, 3))

    def test_conflict_left_as_empty_clause(self):
        formula = make_formula([[1], [2, 3], [-1]])
        result = assign_literal(formula, 1, True)
        # No collapse to a single empty clause: satisfied-free clauses survive
        assert result == ((2, 3), ())
        assert has_empty_clause(result)

    def test_never_grows_and_removes_variable(self):
        formula = make_formula([[1, 2, -3], [-2, 4], [3, -4, 1], [2]])
        for var in range(1, 5):
            for value in (True, False):
                result = assign_literal(formula, var, value)
                assert len(result) <= len(formula)
                assert all(abs(lit) != var for clause in result for lit in clause)

    def test_input_untouched(self):
        formula = make_formula([[1, 2], [-1]])
        assign_literal(formula, 1, True)
        assert formula == ((1, 2), (-1,))


class TestQueries:
    def test_unit_clauses(self):
        assert unit_clauses(make_formula([[1], [2, 3], [-4]])) == [(1,), (-4,)]

    def test_empty_formula_has_no_empty_clause(self):
        assert not has_empty_clause(())

    def test_polarities(self):
        assert polarities(make_formula([[1, -2], [2, 3]])) == {
            1: (True, False), 2: (True, True), 3: (True, False)}

    def test_verify_model(self):
        formula = make_formula([[1, -2], [2, 3]])
        assert verify_model(formula, {1: True, 2: True}) == []
        assert verify_model(formula, {1: False, 2: True, 3: False}) == [(1, -2)]

    def test_unassigned_counts_as_false(self):
        assert evaluate_clause((-1,), {})
        assert not evaluate_clause((1,), {})

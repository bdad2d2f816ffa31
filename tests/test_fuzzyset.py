import pytest

from fugelc.fuzzyset import FuzzySet


def test_new_set_has_zero_evaluation():
    fset = FuzzySet("Low", 0.25, 1)
    assert fset.evaluation == 0.0
    assert fset.name == "Low"
    assert fset.position == 0.25
    assert fset.number == 1


def test_add_eval_accumulates():
    fset = FuzzySet("High", 0.75, 0)
    fset.add_eval(0.25)
    fset.add_eval(0.5)
    assert fset.evaluation == pytest.approx(0.25 + 0.5)


def test_single_add_eval_sets_value():
    fset = FuzzySet("Mid", 0.5)
    fset.add_eval(0.4)
    assert fset.evaluation == 0.4


def test_clear_eval_resets_to_zero():
    fset = FuzzySet("Mid", 0.5)
    fset.add_eval(0.9)
    fset.clear_eval()
    assert fset.evaluation == 0.0


def test_clear_then_add_starts_from_zero():
    fset = FuzzySet("Mid", 0.5)
    fset.add_eval(0.9)
    fset.clear_eval()
    fset.add_eval(0.3)
    assert fset.evaluation == 0.3


def test_name_and_position_are_mutable():
    fset = FuzzySet("A", 0.1)
    fset.name = "B"
    fset.position = 0.6
    assert (fset.name, fset.position) == ("B", 0.6)
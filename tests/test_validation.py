from surebet.models import FULL, SIMPLE
from surebet.validation import pad_rows, validate_session


def rows(*pairs):
    return [{"odd": k, "tax": t} for k, t in pairs]


def test_valid_session():
    assert validate_session(100, rows((2.0, 0), (2.1, 5))) == {}


def test_row_errors_are_keyed_by_path():
    errs = validate_session(100, rows((0.5, 0), (2.0, 150)))
    assert set(errs) == {"odds.0.odd", "odds.1.tax"}


def test_needs_two_rows():
    errs = validate_session(100, rows((2.0, 0)))
    assert list(errs) == ["odds"]


def test_minimum_investment_depends_on_profile():
    assert validate_session(5, rows((2.0, 0), (2.0, 0)), FULL) == {}
    errs = validate_session(5, rows((2.0, 0), (2.0, 0)), SIMPLE)
    assert list(errs) == ["total_investment"]
    assert "10" in errs["total_investment"]


def test_all_errors_reported_together():
    errs = validate_session(0, rows((1.0, -1), (0.5, 0)))
    assert set(errs) == {"total_investment", "odds.0.tax", "odds.1.odd"}


def test_pad_rows_keeps_two_rows():
    assert pad_rows([]) == [{"odd": 1.0, "tax": 0.0}] * 2
    assert pad_rows(rows((2.5, 5))) == [{"odd": 2.5, "tax": 5}, {"odd": 1.0, "tax": 0.0}]
    three = rows((2.0, 0), (3.0, 0), (4.0, 0))
    assert pad_rows(three) == three

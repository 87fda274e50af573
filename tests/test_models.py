import pytest

from surebet.models import FULL, PROFILES, SIMPLE, Outcome, StakeAllocation


def test_outcome_multiplier():
    assert Outcome(odd=2.0, tax=10).multiplier == pytest.approx(1.8)
    assert Outcome(odd=1.5).multiplier == 1.5
    # значения «на полпути» допустимы в модели
    assert Outcome(odd=0, tax=100).multiplier == 0


def test_profiles():
    assert PROFILES == {"full": FULL, "simple": SIMPLE}
    assert FULL.rounding_enabled and FULL.minimum_investment == 1
    assert not SIMPLE.rounding_enabled and SIMPLE.minimum_investment == 10


def test_stake_defaults():
    a = StakeAllocation()
    assert a.value == 0 and a.recommended == 0

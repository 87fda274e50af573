"""
Движок распределения: делим банк между исходами так, чтобы чистый возврат
(после налога) был одинаковым при любом победителе, и считаем гарантированную
прибыль для точных и округлённых ставок.

Все функции чистые: никакого состояния между вызовами.
"""

from __future__ import annotations
from typing import List, Sequence
import logging
import math

from .models import (
    FULL,
    Calculation,
    EngineProfile,
    Outcome,
    StakeAllocation,
    effective_multiplier,
)

logger = logging.getLogger(__name__)


class InvalidOutcomeError(ValueError):
    """Эффективный множитель исхода не положителен (odd=0, налог ≥ 100% ...)."""

    def __init__(self, index: int, outcome: Outcome):
        self.index = index
        self.outcome = outcome
        super().__init__(
            f"outcome #{index + 1} has non-positive effective multiplier "
            f"(odd={outcome.odd!r}, tax={outcome.tax!r})"
        )


# -----------------------------------------------------------------------------
# Вспомогательные формулы

def round_to_unit(value: float, unit: float = 10.0) -> float:
    """Округление до ближайшего кратного unit, половины — от нуля."""
    q = value / unit
    return math.copysign(math.floor(abs(q) + 0.5), q) * unit


def _is_degenerate(total_investment: float, outcomes: Sequence[Outcome] | None) -> bool:
    # NaN банк считается незаполненным, как и 0
    if not total_investment or math.isnan(total_investment):
        return True
    return not outcomes or len(outcomes) < 2


def _multipliers(outcomes: Sequence[Outcome]) -> List[float]:
    res: List[float] = []
    for i, o in enumerate(outcomes):
        m = effective_multiplier(o.odd, o.tax)
        if not (m > 0) or math.isinf(m):
            raise InvalidOutcomeError(i, o)
        res.append(m)
    return res


def market_margin(outcomes: Sequence[Outcome]) -> float:
    """
    Маржа линии с учётом налога: Σ 1/m_i − 1.
    Отрицательная маржа — это и есть вилка (surebet).
    """
    if not outcomes or len(outcomes) < 2:
        return 0.0
    return sum(1 / m for m in _multipliers(outcomes)) - 1


def is_surebet(outcomes: Sequence[Outcome]) -> bool:
    return market_margin(outcomes) < 0


# -----------------------------------------------------------------------------
# Распределение и прибыль

def allocate(
    total_investment: float,
    outcomes: Sequence[Outcome] | None,
    profile: EngineProfile = FULL,
) -> List[StakeAllocation]:
    """
    Ставки по исходам, обратно пропорциональные эффективному множителю:

        value_i = (total / m_i) / Σ 1/m_j

    Пока форма не заполнена (банк 0, исходов < 2) возвращаем нули той же длины.
    """
    zero_rec = 0.0 if profile.rounding_enabled else None
    if _is_degenerate(total_investment, outcomes):
        return [StakeAllocation(value=0.0, recommended=zero_rec) for _ in outcomes or []]

    mults = _multipliers(outcomes)
    sum_of_inverses = sum(1 / m for m in mults)

    res: List[StakeAllocation] = []
    for m in mults:
        value = (total_investment / m) / sum_of_inverses
        recommended = round_to_unit(value, profile.round_unit) if profile.rounding_enabled else None
        res.append(StakeAllocation(value=value, recommended=recommended))
    return res


def profit(
    total_investment: float,
    outcomes: Sequence[Outcome] | None,
    allocations: Sequence[StakeAllocation],
    use_recommended: bool = False,
) -> float:
    """
    Гарантированная прибыль: минимальный возврат по всем исходам минус
    поставленная сумма (total либо Σ recommended для округлённых ставок).
    """
    if _is_degenerate(total_investment, outcomes):
        return 0.0

    stakes = [a.recommended if use_recommended else a.value for a in allocations]
    if any(s is None or math.isnan(s) for s in stakes):
        return 0.0

    returns = [s * o.multiplier for s, o in zip(stakes, outcomes, strict=True)]
    staked = sum(stakes) if use_recommended else total_investment
    return min(returns) - staked


def recompute(
    total_investment: float,
    outcomes: Sequence[Outcome] | None,
    profile: EngineProfile = FULL,
) -> Calculation:
    """Полный пересчёт для формы: ставки, обе прибыли и маржа линии."""
    allocations = allocate(total_investment, outcomes, profile)
    calc = Calculation(
        total_investment=total_investment,
        allocations=allocations,
        profit=profit(total_investment, outcomes, allocations),
        market_margin=0.0 if _is_degenerate(total_investment, outcomes) else market_margin(outcomes),
    )
    if profile.rounding_enabled:
        calc.recommended_profit = profit(
            total_investment, outcomes, allocations, use_recommended=True
        )
        calc.recommended_total = sum(a.recommended for a in allocations)

    logger.debug(
        "recompute profile=%s total=%s outcomes=%d profit=%.4f recommended_profit=%s",
        profile.name, total_investment, len(allocations), calc.profit, calc.recommended_profit,
    )
    return calc

"""
Модель данных калькулятора: исходы (odd + налог), ставки по исходам,
профили движка и итог одного пересчёта.
"""

from __future__ import annotations
from typing import List

from pydantic import BaseModel, Field

# Шаг округления рекомендованной ставки
ROUND_UNIT = 10.0


def effective_multiplier(odd: float, tax: float) -> float:
    """m = odd · (1 − tax/100): чистый возврат на единицу ставки после налога."""
    return odd * (1 - tax / 100)


class Outcome(BaseModel):
    odd: float         # десятичный коэффициент
    tax: float = 0     # налог на выигрыш, %

    @property
    def multiplier(self) -> float:
        return effective_multiplier(self.odd, self.tax)


class StakeAllocation(BaseModel):
    value: float = 0
    recommended: float | None = 0    # None, если округление выключено


class EngineProfile(BaseModel):
    """
    Конфигурация движка. Две сборки калькулятора отличаются только этим:
    полная (с округлением, минимум 1) и упрощённая (без округления, минимум 10).
    """
    name: str = "full"
    rounding_enabled: bool = True
    minimum_investment: float = Field(1, ge=0)
    round_unit: float = Field(ROUND_UNIT, gt=0)


FULL = EngineProfile(name="full", rounding_enabled=True, minimum_investment=1)
SIMPLE = EngineProfile(name="simple", rounding_enabled=False, minimum_investment=10)

PROFILES = {p.name: p for p in (FULL, SIMPLE)}


class Calculation(BaseModel):
    total_investment: float
    allocations: List[StakeAllocation]
    profit: float = 0
    recommended_profit: float | None = None
    recommended_total: float | None = None
    market_margin: float = 0

    @property
    def is_profitable(self) -> bool:
        return self.profit > 0

"""
Конфигурация: профиль движка и уровень логов из переменных окружения / .env.
"""

from __future__ import annotations
import logging
import os

from dotenv import load_dotenv

from .models import PROFILES, EngineProfile

load_dotenv()

DEFAULT_PROFILE = "full"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_profile() -> EngineProfile:
    """Профиль из SUREBET_PROFILE (+ шаг округления из SUREBET_ROUND_UNIT)."""
    name = os.getenv("SUREBET_PROFILE", DEFAULT_PROFILE).strip().lower()
    if name not in PROFILES:
        raise ValueError(
            f"SUREBET_PROFILE must be one of {sorted(PROFILES)}, got {name!r}"
        )
    profile = PROFILES[name]

    unit = os.getenv("SUREBET_ROUND_UNIT")
    if unit:
        try:
            unit_val = float(unit)
        except ValueError:
            raise ValueError(f"SUREBET_ROUND_UNIT must be a number, got {unit!r}") from None
        if unit_val <= 0:
            raise ValueError(f"SUREBET_ROUND_UNIT must be > 0, got {unit!r}")
        profile = profile.model_copy(update={"round_unit": unit_val})
    return profile


def setup_logging() -> None:
    level = os.getenv("SUREBET_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT)

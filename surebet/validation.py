"""Input contract of the calculator form: odds >= 1, tax in [0, 100], >= 2 rows,
bank not below the profile minimum. The engine does not enforce any of this."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from .models import FULL, EngineProfile

logger = logging.getLogger(__name__)


class OddRow(BaseModel):
    odd: float = Field(ge=1)
    tax: float = Field(0, ge=0, le=100)


class SessionForm(BaseModel):
    total_investment: float
    odds: List[OddRow] = Field(min_length=2)

    @field_validator("total_investment")
    @classmethod
    def _check_minimum(cls, v: float, info: ValidationInfo) -> float:
        profile: EngineProfile = (info.context or {}).get("profile", FULL)
        if v < profile.minimum_investment:
            raise ValueError(f"must be >= {profile.minimum_investment:g}")
        return v


def _field_path(loc: Sequence[Any]) -> str:
    return ".".join(str(part) for part in loc)


def validate_session(
    total_investment: float,
    rows: Sequence[Dict[str, Any]],
    profile: EngineProfile = FULL,
) -> Dict[str, str]:
    """Return {field path: message}; an empty dict means the form is valid."""
    try:
        SessionForm.model_validate(
            {"total_investment": total_investment, "odds": list(rows)},
            context={"profile": profile},
        )
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            errors.setdefault(_field_path(err["loc"]), err["msg"])
        logger.debug("session rejected: %s", errors)
        return errors
    return {}


MIN_ROWS = 2
DEFAULT_ROW = {"odd": 1.0, "tax": 0.0}


def pad_rows(rows: Sequence[Dict[str, Any]], minimum: int = MIN_ROWS) -> List[Dict[str, Any]]:
    """Top up the odds table with default rows so it never drops below `minimum`."""
    res = [dict(r) for r in rows]
    res.extend(dict(DEFAULT_ROW) for _ in range(minimum - len(res)))
    return res

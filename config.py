from __future__ import annotations
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator
load_dotenv()

# -----------------------------
# Config defaults
# -----------------------------
DEFAULT_LOWER_BOUND = 0
DEFAULT_UPPER_BOUND = 100
DEFAULT_THINK_DELAY = 1.5

ENV_PREFIX = "GUESSING_GAME_"

class GameConfig(BaseModel):
    lower_bound: int = Field(DEFAULT_LOWER_BOUND, description="Smallest number that can be thought of")
    upper_bound: int = Field(DEFAULT_UPPER_BOUND, description="Largest number that can be thought of")
    think_delay: float = Field(DEFAULT_THINK_DELAY, ge=0, description="Seconds the computer pauses after guessing", allow_inf_nan=False)

    @model_validator(mode="after")
    def _check_range(self) -> GameConfig:
        if self.lower_bound > self.upper_bound:
            raise ValueError(
                f"lower_bound ({self.lower_bound}) must not exceed upper_bound ({self.upper_bound})"
            )
        return self

def _from_env() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in GameConfig.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return values

def load_config(
    lower_bound: Optional[int] = None,
    upper_bound: Optional[int] = None,
    think_delay: Optional[float] = None,
) -> GameConfig:
    """
    Environment (and .env) values first, then any explicit non-None overrides.
    Raises pydantic.ValidationError on bad values.
    """
    values = _from_env()
    overrides = {"lower_bound": lower_bound, "upper_bound": upper_bound, "think_delay": think_delay}
    values.update({k: v for k, v in overrides.items() if v is not None})
    return GameConfig(**values)

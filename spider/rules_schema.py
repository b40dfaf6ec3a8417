"""Validation schema for Spider game configuration."""

from __future__ import annotations

import json
from pathlib import Path
from random import Random
from typing import Optional, Union

from pydantic import BaseModel, Field, validator

from .deck import normalize_suit_count


class GameConfig(BaseModel):
    suit_count: int = Field(1, description="Number of suits in play; anything but 1, 2 or 4 becomes 1.")
    seed: Optional[int] = Field(None, description="Seed for the shuffle; None draws from system entropy.")

    class Config:
        extra = "forbid"

    @validator("suit_count", pre=True)
    def normalize_suits(cls, value: object) -> int:
        try:
            count = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 1
        return normalize_suit_count(count)

    def rng(self) -> Random:
        return Random(self.seed)


def load_config(path: Union[str, Path]) -> GameConfig:
    """Read a JSON object from ``path`` into a GameConfig."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return GameConfig.parse_obj(payload)

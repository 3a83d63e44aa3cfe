"""Filter configuration loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .filters.butterworth import BandType, ButterworthCascade


class FilterConfig(BaseModel):
    """Parameters for a Butterworth cascade.

    Only types and shapes are checked here. Whether the values make physical
    sense (positive order, lower cutoff below upper) is the caller's concern.
    """

    model_config = ConfigDict(extra="ignore")

    order: int
    critical_frequencies: List[float] = Field(min_length=1)
    band_type: BandType = BandType.LOWPASS
    sampling_frequency: float

    @field_validator("critical_frequencies", mode="before")
    @classmethod
    def _wrap_scalar(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return [value]
        return value

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "FilterConfig":
        return cls.model_validate(dict(cfg))

    @classmethod
    def from_file(cls, path: str | Path) -> "FilterConfig":
        raw = Path(path)
        if not raw.exists():
            raise FileNotFoundError(f"Configuration file not found: {raw}")
        text = raw.read_text(encoding="utf-8")
        cfg = yaml.safe_load(text) if raw.suffix.lower() in {".yml", ".yaml"} else json.loads(text)
        if not isinstance(cfg, Mapping):
            raise ValueError("Filter config file must contain a mapping/object at the top level")
        # allow the filter block to be nested under a "filter" key
        if isinstance(cfg.get("filter"), Mapping):
            cfg = cfg["filter"]
        return cls.from_mapping(cfg)

    def build(self) -> ButterworthCascade:
        return ButterworthCascade(
            order=self.order,
            critical_frequencies=self.critical_frequencies,
            band_type=self.band_type,
            sampling_frequency=self.sampling_frequency,
        )

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field

WEIGHT_MEASURE_TYPE = 1
REAL_MEASUREMENT_CATEGORY = 1
# Withings reports weight as an integer scaled by 10**unit; readings that omit
# the unit are in grams.
DEFAULT_WEIGHT_UNIT = -3


class TokenBody(BaseModel):
    """Payload of a successful ``action=requesttoken`` call."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    expires_in: Optional[Union[int, str]] = None
    token_type: Optional[str] = None
    userid: Optional[Union[int, str]] = None


class TokenResponse(BaseModel):
    status: int = 0
    error: Optional[str] = None
    body: TokenBody = Field(default_factory=TokenBody)


class Measure(BaseModel):
    value: float
    type: Optional[int] = None
    unit: Optional[int] = None

    @property
    def kilograms(self) -> float:
        unit = DEFAULT_WEIGHT_UNIT if self.unit is None else self.unit
        if unit < 0:
            return self.value / 10 ** -unit
        return self.value * 10 ** unit


class MeasureGroup(BaseModel):
    date: Optional[int] = None
    created: Optional[int] = None
    measures: List[Measure] = Field(default_factory=list)

    def weight_measure(self) -> Optional[Measure]:
        """Return the weight entry of the group, or its first entry when untyped."""
        for measure in self.measures:
            if measure.type == WEIGHT_MEASURE_TYPE:
                return measure
        if self.measures and all(m.type is None for m in self.measures):
            return self.measures[0]
        return None


class MeasuresBody(BaseModel):
    measuregrps: List[MeasureGroup] = Field(default_factory=list)


class MeasuresResponse(BaseModel):
    status: int = 0
    body: MeasuresBody = Field(default_factory=MeasuresBody)

    def latest_group(self) -> Optional[MeasureGroup]:
        groups = self.body.measuregrps
        if not groups:
            return None
        # max() keeps the first group on ties, which is the newest one in
        # Withings' ordering.
        return max(groups, key=lambda group: group.date or 0)


class WeightReading(BaseModel):
    """The latest body weight extracted from a ``getmeas`` response."""

    weight_kg: float = Field(..., description="Body weight in kilograms")
    measured_at: Optional[datetime] = Field(
        None, description="When the scale recorded the measurement"
    )

    @classmethod
    def from_group(cls, group: MeasureGroup, measure: Measure) -> "WeightReading":
        measured_at = (
            datetime.fromtimestamp(group.date, tz=timezone.utc)
            if group.date is not None
            else None
        )
        return cls(weight_kg=measure.kilograms, measured_at=measured_at)

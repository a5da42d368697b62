from .withings import (
    Measure,
    MeasureGroup,
    MeasuresBody,
    MeasuresResponse,
    TokenBody,
    TokenResponse,
    WeightReading,
)

__all__ = [
    "Measure",
    "MeasureGroup",
    "MeasuresBody",
    "MeasuresResponse",
    "TokenBody",
    "TokenResponse",
    "WeightReading",
]

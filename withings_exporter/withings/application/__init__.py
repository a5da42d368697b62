"""Application layer helpers for Withings integration."""

from .ports import WithingsPort
from .services import (
    CodeReader,
    Printer,
    fetch_current_weight,
    obtain_access_token,
)

__all__ = [
    "CodeReader",
    "Printer",
    "WithingsPort",
    "fetch_current_weight",
    "obtain_access_token",
]

from __future__ import annotations

from .result import ExtractionResult, NotFound, NotFoundType, ValueKind
from .selector import Axis, FilterKind, Segment, StepFilter

__all__ = (
    "Axis",
    "ExtractionResult",
    "FilterKind",
    "NotFound",
    "NotFoundType",
    "Segment",
    "StepFilter",
    "ValueKind",
)

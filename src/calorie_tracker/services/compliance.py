"""Tolerance bands used to decide whether a day met the target."""

import math

from calorie_tracker.domain.errors import InvalidTargetError
from calorie_tracker.domain.stats import DayStatus, ProgressStatus

DEFAULT_TARGET_KCAL = 2000.0
WITHIN_TOLERANCE = 0.05
NEAR_TOLERANCE = 0.10
BOUNDARY_REL_TOL = 1e-12
NEAR_PROGRESS_PCT = 95
EXCEEDED_PROGRESS_PCT = 105


def resolve_target(target_kcal: object) -> float:
    """Return a usable target, substituting the default for missing values.

    ``None``, zero, negative and non-finite targets fall back to 2000 kcal.
    Values that are not numbers at all are rejected.
    """
    if target_kcal is None:
        return DEFAULT_TARGET_KCAL
    if isinstance(target_kcal, bool) or not isinstance(target_kcal, int | float):
        raise InvalidTargetError(
            f"target_kcal must be a number, got {type(target_kcal).__name__}"
        )
    if not math.isfinite(target_kcal) or target_kcal <= 0:
        return DEFAULT_TARGET_KCAL
    return float(target_kcal)


def is_within_target(total_kcal: float, target_kcal: float) -> bool:
    """Return True when the total is within 5% of the target."""
    return _within_band(total_kcal, target_kcal, WITHIN_TOLERANCE)


def is_near_target(total_kcal: float, target_kcal: float) -> bool:
    """Return True when the total misses the 5% band but stays within 10%."""
    return not _within_band(
        total_kcal, target_kcal, WITHIN_TOLERANCE
    ) and _within_band(total_kcal, target_kcal, NEAR_TOLERANCE)


def _within_band(total_kcal: float, target_kcal: float, tolerance: float) -> bool:
    # Boundary is inclusive; isclose absorbs the rounding of total - target.
    deviation = abs(total_kcal - target_kcal)
    limit = target_kcal * tolerance
    return deviation <= limit or math.isclose(
        deviation, limit, rel_tol=BOUNDARY_REL_TOL
    )


def classify_day(total_kcal: float | None, target_kcal: float) -> DayStatus:
    """Classify a day's total; days without entries are a miss."""
    if not total_kcal:
        return DayStatus.MISS
    if is_within_target(total_kcal, target_kcal):
        return DayStatus.WITHIN
    if is_near_target(total_kcal, target_kcal):
        return DayStatus.NEAR
    return DayStatus.MISS


def progress_status(consumed_kcal: float, target_kcal: float) -> ProgressStatus:
    """Return the progress ring status for today's intake."""
    pct = consumed_kcal / target_kcal * 100
    if pct > EXCEEDED_PROGRESS_PCT:
        return ProgressStatus.EXCEEDED
    if pct >= NEAR_PROGRESS_PCT:
        return ProgressStatus.NEAR
    return ProgressStatus.OK

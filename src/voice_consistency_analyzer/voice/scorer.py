"""
Consistency Scorer

Compare a fresh measurement against a voice profile. Each dimension has a
tolerance band scored at 100, then falls off linearly to 0 at twice the
tolerance. The overall score is the weighted mean of the per-dimension
scores.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .labels import tip_for
from .metrics import measure, round_half_up
from .models import ConsistencyResult, Dimension, DimensionComparison, Profile, Status

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DimensionSpec:
    """Fixed scoring parameters for one dimension."""
    key: Dimension
    label: str
    weight: float
    tolerance: float


DIMENSIONS: tuple[DimensionSpec, ...] = (
    DimensionSpec(Dimension.FORMALITY, "Formality", 1.5, 20),
    DimensionSpec(Dimension.AVG_SENTENCE_LENGTH, "Sentence Length", 1.0, 5),
    DimensionSpec(Dimension.VOCABULARY_COMPLEXITY, "Vocabulary Level", 1.2, 15),
    DimensionSpec(Dimension.ACTIVE_RATIO, "Active Voice", 1.0, 15),
    DimensionSpec(Dimension.QUESTION_FREQUENCY, "Question Usage", 0.8, 10),
    DimensionSpec(Dimension.PRONOUN_USAGE, "Person/Perspective", 1.3, 15),
    DimensionSpec(Dimension.POWER_WORD_DENSITY, "Power Words", 0.8, 2),
    DimensionSpec(Dimension.EMPHASIS_RATE, "Emphasis", 0.7, 3),
    DimensionSpec(Dimension.SENTENCE_VARIETY, "Sentence Variety", 0.7, 15),
)

MATCH_THRESHOLD = 80
PARTIAL_THRESHOLD = 50


def score_dimension(profile_value: float, current_value: float, tolerance: float) -> int:
    """
    Score the drift of one dimension.

    Returns 100 while the difference stays within tolerance, then drops
    linearly, reaching 0 when the difference is twice the tolerance.
    """
    diff = abs(profile_value - current_value)
    if diff <= tolerance:
        return 100
    raw = max(0, 100 - (diff - tolerance) / tolerance * 100)
    return int(round_half_up(raw))


def status_for(score: int) -> Status:
    if score >= MATCH_THRESHOLD:
        return Status.MATCH
    elif score >= PARTIAL_THRESHOLD:
        return Status.PARTIAL
    return Status.MISMATCH


def compare_dimension(spec: DimensionSpec, profile_value: float, current_value: float) -> DimensionComparison:
    score = score_dimension(profile_value, current_value, spec.tolerance)
    status = status_for(score)
    tip = None
    if status != Status.MATCH:
        tip = tip_for(spec.key, profile_value, current_value)

    return DimensionComparison(
        key=spec.key,
        label=spec.label,
        profile_value=profile_value,
        current_value=current_value,
        score=score,
        status=status,
        tip=tip,
    )


def check_consistency(text: Optional[str], profile: Optional[Profile]) -> Optional[ConsistencyResult]:
    """
    Check how closely a text matches a voice profile.

    Args:
        text: New copy to check
        profile: Previously built voice profile

    Returns:
        ConsistencyResult with the overall score and one row per dimension
        in canonical order, or None if the text is empty or the profile
        is missing
    """
    if profile is None:
        return None

    current = measure(text)
    if current is None:
        return None

    breakdown = tuple(
        compare_dimension(spec, profile.value(spec.key), current.value(spec.key))
        for spec in DIMENSIONS
    )

    weighted = sum(row.score * spec.weight for row, spec in zip(breakdown, DIMENSIONS))
    total_weight = sum(spec.weight for spec in DIMENSIONS)
    overall_score = int(round_half_up(weighted / total_weight))

    logger.debug(
        "Consistency %d with %d of %d dimensions off",
        overall_score,
        sum(1 for row in breakdown if row.status != Status.MATCH),
        len(breakdown),
    )
    return ConsistencyResult(overall_score=overall_score, breakdown=breakdown, current=current)

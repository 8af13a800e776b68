"""
Voice Analysis Module

Measure nine stylistic dimensions of a text, average them into a voice
profile, and score new copy against that profile.
"""

from .models import (
    Analysis,
    ConsistencyResult,
    Dimension,
    DimensionComparison,
    Profile,
    Status,
)
from .tokenizer import get_words, get_sentences
from .metrics import measure, count_syllables
from .profile import build_profile
from .scorer import DIMENSIONS, DimensionSpec, check_consistency, score_dimension, status_for
from .labels import DIMENSION_SCALES, Verdict, label_for, scale_percent, tip_for, verdict_for

__all__ = [
    # Models
    "Analysis",
    "ConsistencyResult",
    "Dimension",
    "DimensionComparison",
    "Profile",
    "Status",
    # Tokenization
    "get_words",
    "get_sentences",
    # Measurement
    "measure",
    "count_syllables",
    # Profile
    "build_profile",
    # Scoring
    "DIMENSIONS",
    "DimensionSpec",
    "check_consistency",
    "score_dimension",
    "status_for",
    # Labels
    "DIMENSION_SCALES",
    "Verdict",
    "label_for",
    "scale_percent",
    "tip_for",
    "verdict_for",
]

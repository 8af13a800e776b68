"""
Voice Analysis Models

Plain value types passed between the extractor, the profile builder and
the consistency scorer. None of them hold behaviour beyond serialization,
so a caller can persist and restore them freely.
"""

from dataclasses import dataclass, asdict, fields
from enum import Enum
from typing import Optional
import json


class Dimension(str, Enum):
    """The nine stylistic dimensions, in canonical display order."""

    FORMALITY = "formality"
    AVG_SENTENCE_LENGTH = "avg_sentence_length"
    VOCABULARY_COMPLEXITY = "vocabulary_complexity"
    ACTIVE_RATIO = "active_ratio"
    QUESTION_FREQUENCY = "question_frequency"
    PRONOUN_USAGE = "pronoun_usage"
    POWER_WORD_DENSITY = "power_word_density"
    EMPHASIS_RATE = "emphasis_rate"
    SENTENCE_VARIETY = "sentence_variety"


class Status(str, Enum):
    """Verdict for a single dimension."""

    MATCH = "match"
    PARTIAL = "partial"
    MISMATCH = "mismatch"


@dataclass(frozen=True)
class Analysis:
    """Dimension vector measured from one piece of text."""

    formality: float
    avg_sentence_length: float
    vocabulary_complexity: float
    active_ratio: float
    question_frequency: float
    pronoun_usage: float
    power_word_density: float
    emphasis_rate: float
    sentence_variety: float
    word_count: int
    sentence_count: int

    def value(self, dimension: Dimension | str) -> float:
        return getattr(self, Dimension(dimension).value)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


@dataclass(frozen=True)
class Profile:
    """
    Averaged voice signature built from one or more samples.

    Each dimension is the mean across the contributing analyses, rounded
    to one decimal. Never mutated once built.
    """

    formality: float
    avg_sentence_length: float
    vocabulary_complexity: float
    active_ratio: float
    question_frequency: float
    pronoun_usage: float
    power_word_density: float
    emphasis_rate: float
    sentence_variety: float
    sample_count: int
    created_at: str  # ISO-8601, UTC
    total_words: int

    def value(self, dimension: Dimension | str) -> float:
        return getattr(self, Dimension(dimension).value)

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, d: dict) -> "Profile":
        return cls(**{f.name: d[f.name] for f in fields(cls)})

    @classmethod
    def from_json(cls, json_str: str) -> "Profile":
        return cls.from_dict(json.loads(json_str))

    def summary(self) -> str:
        """Generate a human-readable summary of the profile."""
        from .labels import DIMENSION_SCALES, label_for

        lines = [
            "=== Voice Profile ===",
            "",
            f"   Samples: {self.sample_count}",
            f"   Total words: {self.total_words:,}",
            f"   Created: {self.created_at}",
            "",
        ]
        for dimension in Dimension:
            value = self.value(dimension)
            scale = DIMENSION_SCALES[dimension]
            lines.append(
                f"   {scale.label}: {value:g} ({label_for(dimension, value)})"
            )
        return "\n".join(lines)


@dataclass(frozen=True)
class DimensionComparison:
    """One row of a consistency check."""

    key: Dimension
    label: str
    profile_value: float
    current_value: float
    score: int
    status: Status
    tip: Optional[str] = None

    def to_dict(self) -> dict:
        d = asdict(self)
        d["key"] = self.key.value
        d["status"] = self.status.value
        return d


@dataclass(frozen=True)
class ConsistencyResult:
    """Outcome of checking one text against a profile."""

    overall_score: int
    breakdown: tuple[DimensionComparison, ...]
    current: Analysis

    @property
    def mismatches(self) -> list[DimensionComparison]:
        """Rows that did not match, in canonical order."""
        return [row for row in self.breakdown if row.status != Status.MATCH]

    def to_dict(self) -> dict:
        return {
            "overall_score": self.overall_score,
            "breakdown": [row.to_dict() for row in self.breakdown],
            "current": self.current.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

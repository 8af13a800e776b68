"""
Dimension Labels and Tips

Map raw dimension values to qualitative phrases, and profile/current
pairs to corrective guidance.
"""

from dataclasses import dataclass
from typing import Optional

from .models import Dimension


@dataclass(frozen=True)
class Scale:
    """How a dimension is drawn on a profile card."""
    label: str
    left_label: str
    right_label: str
    maximum: float = 100


DIMENSION_SCALES: dict[Dimension, Scale] = {
    Dimension.FORMALITY: Scale("Formality", "Casual", "Formal"),
    Dimension.AVG_SENTENCE_LENGTH: Scale("Sentence Length", "Short", "Long", 30),
    Dimension.VOCABULARY_COMPLEXITY: Scale("Vocabulary Level", "Simple", "Complex"),
    Dimension.ACTIVE_RATIO: Scale("Voice", "Passive", "Active"),
    Dimension.QUESTION_FREQUENCY: Scale("Question Usage", "None", "Frequent"),
    Dimension.PRONOUN_USAGE: Scale("Perspective", "We/Brand", "They/Third"),
    Dimension.POWER_WORD_DENSITY: Scale("Power Words", "Minimal", "Heavy", 10),
    Dimension.EMPHASIS_RATE: Scale("Emphasis", "Understated", "Emphatic", 10),
    Dimension.SENTENCE_VARIETY: Scale("Sentence Variety", "Uniform", "Varied"),
}

# (upper bound, label) pairs checked in order; the final label has no bound
_BUCKETS: dict[Dimension, tuple[tuple[Optional[float], str], ...]] = {
    Dimension.FORMALITY: (
        (25, "Very Casual"), (45, "Casual"), (55, "Balanced"),
        (75, "Professional"), (None, "Very Formal"),
    ),
    Dimension.AVG_SENTENCE_LENGTH: (
        (10, "Very Short"), (15, "Short"), (20, "Moderate"),
        (25, "Long"), (None, "Very Long"),
    ),
    Dimension.VOCABULARY_COMPLEXITY: (
        (20, "Simple"), (40, "Accessible"), (60, "Moderate"),
        (80, "Advanced"), (None, "Expert"),
    ),
    Dimension.ACTIVE_RATIO: (
        (50, "Mostly Passive"), (70, "Mixed"), (90, "Mostly Active"),
        (None, "Very Active"),
    ),
    Dimension.QUESTION_FREQUENCY: (
        (10, "Rare"), (25, "Occasional"), (50, "Frequent"), (None, "Very Frequent"),
    ),
    Dimension.PRONOUN_USAGE: (
        (20, "We-focused"), (40, "Brand-centric"), (60, "You-focused"),
        (80, "Reader-centric"), (None, "Third Person"),
    ),
    Dimension.POWER_WORD_DENSITY: (
        (1, "Minimal"), (3, "Moderate"), (5, "Strong"), (None, "Very High"),
    ),
    Dimension.EMPHASIS_RATE: (
        (1, "Understated"), (3, "Moderate"), (6, "Energetic"), (None, "Very Emphatic"),
    ),
    Dimension.SENTENCE_VARIETY: (
        (20, "Uniform"), (40, "Somewhat Varied"), (60, "Varied"), (None, "Very Varied"),
    ),
}

# (text when current > profile, text otherwise)
_TIPS: dict[Dimension, tuple[str, str]] = {
    Dimension.FORMALITY: (
        "This copy is more formal than your usual voice. Try using shorter, more conversational words.",
        "This copy is more casual than your usual voice. Consider using more polished language.",
    ),
    Dimension.AVG_SENTENCE_LENGTH: (
        "Your sentences average {current} words, longer than your typical {profile}. Break up longer sentences.",
        "Your sentences average {current} words, shorter than your typical {profile}. Consider adding detail to key sentences.",
    ),
    Dimension.VOCABULARY_COMPLEXITY: (
        "You're using more complex vocabulary than usual. Swap multi-syllable words for simpler alternatives.",
        "Your vocabulary is simpler than usual. If the topic calls for it, use more precise terminology.",
    ),
    Dimension.ACTIVE_RATIO: (
        "Great, even more active voice than usual. Keep it up.",
        'More passive voice than your typical copy. Rewrite "was done by" patterns to "[subject] did."',
    ),
    Dimension.QUESTION_FREQUENCY: (
        "More questions than usual. Make sure they're rhetorical and purposeful, not filler.",
        "Fewer questions than usual. Adding a question can engage readers and break up statements.",
    ),
    Dimension.PRONOUN_USAGE: (
        'Less "you"-focused than usual. Shift some sentences to address the reader directly.',
        'More "you"-focused than usual. Consider balancing with brand perspective ("we").',
    ),
    Dimension.POWER_WORD_DENSITY: (
        "More power words than usual. Make sure they feel natural, not forced.",
        'Fewer persuasive power words than usual. Consider adding words like "proven," "free," or "instant."',
    ),
    Dimension.EMPHASIS_RATE: (
        "More emphasis markers (caps, exclamation marks) than usual. Tone it down to match your established voice.",
        "Less emphasis than usual. Add strategic bold text or exclamation for key points.",
    ),
    Dimension.SENTENCE_VARIETY: (
        "More sentence length variation than usual. This can be good, just make sure it reads smoothly.",
        "Sentences are more uniform than usual. Mix short punchy sentences with longer explanatory ones.",
    ),
}


@dataclass(frozen=True)
class Verdict:
    """Overall reading of a consistency score."""
    label: str
    summary: str


def _as_dimension(key) -> Optional[Dimension]:
    try:
        return Dimension(key)
    except ValueError:
        return None


def _format_number(value: float) -> str:
    # 12.0 -> "12", 12.5 -> "12.5"
    return f"{value:g}"


def label_for(key: Dimension | str, value: float) -> str:
    """
    Qualitative phrase for a raw dimension value.

    Unknown keys fall back to the value itself.
    """
    dimension = _as_dimension(key)
    if dimension is None:
        return str(value)

    if dimension == Dimension.QUESTION_FREQUENCY and value == 0:
        return "No Questions"

    for upper, label in _BUCKETS[dimension]:
        if upper is None or value < upper:
            return label


def tip_for(key: Dimension | str, profile_value: float, current_value: float) -> Optional[str]:
    """Corrective guidance pointing the current text back toward the profile."""
    dimension = _as_dimension(key)
    if dimension is None:
        return None

    higher, lower = _TIPS[dimension]
    template = higher if current_value > profile_value else lower
    return template.format(
        current=_format_number(current_value),
        profile=_format_number(profile_value),
    )


def verdict_for(overall_score: float) -> Verdict:
    """Headline label and explanation for an overall consistency score."""
    if overall_score >= 80:
        return Verdict(
            "On-Brand",
            "This copy closely matches your established voice profile. The tone and style are consistent.",
        )
    elif overall_score >= 60:
        return Verdict(
            "Mostly Consistent",
            "This copy mostly aligns with your voice, but a few dimensions are off. See details below.",
        )
    elif overall_score >= 40:
        return Verdict(
            "Somewhat Off",
            "This copy deviates from your established voice in several areas. Review the mismatched dimensions.",
        )
    return Verdict(
        "Off-Brand",
        "This copy doesn't match your voice profile. Consider revising to align with your brand voice.",
    )


def scale_percent(key: Dimension | str, value: float) -> float:
    """Position of a value on its display scale, 0-100."""
    dimension = _as_dimension(key)
    maximum = DIMENSION_SCALES[dimension].maximum if dimension else 100
    return max(0.0, min(100.0, value / maximum * 100))

"""
Voice Profile Builder

Aggregate the analyses of several writing samples into one profile.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Iterable, Optional

from .metrics import measure, round_half_up
from .models import Dimension, Profile

logger = logging.getLogger(__name__)


def build_profile(samples: Iterable[str]) -> Optional[Profile]:
    """
    Build a voice profile from writing samples.

    Samples that measure to nothing (empty or whitespace) are skipped. No
    minimum sample count is imposed here; callers that want two or more
    samples enforce that themselves.

    Args:
        samples: Raw sample texts

    Returns:
        Profile averaged over the valid samples, or None if there were none
    """
    analyses = []
    for index, sample in enumerate(samples):
        analysis = measure(sample)
        if analysis is None:
            logger.debug("Skipping empty sample %d", index)
            continue
        analyses.append(analysis)

    if not analyses:
        return None

    means = {}
    for dimension in Dimension:
        values = [a.value(dimension) for a in analyses]
        means[dimension.value] = round_half_up(math.fsum(values) / len(values), 1)

    profile = Profile(
        **means,
        sample_count=len(analyses),
        created_at=datetime.now(timezone.utc).isoformat(),
        total_words=sum(a.word_count for a in analyses),
    )
    logger.debug(
        "Built profile from %d samples (%d words)", profile.sample_count, profile.total_words
    )
    return profile

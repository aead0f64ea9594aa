"""
Tag-similarity aesthetic detection.

Scores a bag of descriptive tags against every catalogued profile:
  1. Build the vocabulary from the input tags plus the profile's tags
  2. Count, per vocabulary term, how many tags on each side contain it
     (or are contained by it), case-insensitively
  3. Confidence is the cosine similarity of the two count vectors

A profile is detected when its confidence clears both the caller's minimum
and the profile's own threshold.
"""
import logging
from typing import Iterable, Mapping, Optional, Sequence

from ..catalog import AESTHETIC_PROFILES
from ..models import AestheticProfile, DetectionResult
from ..similarity import cosine_similarity

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONFIDENCE = 0.3


def clean_tags(tags: Iterable[str]) -> list[str]:
    """Strip and lower-case tags, dropping blanks."""
    cleaned = []
    for tag in tags:
        if tag is None:
            continue
        tag = str(tag).strip().lower()
        if tag:
            cleaned.append(tag)
    return cleaned


def _containment_vector(vocabulary: Sequence[str], tags: Sequence[str]) -> list[int]:
    return [
        sum(1 for tag in tags if term in tag or tag in term)
        for term in vocabulary
    ]


def score_profile(tags: Sequence[str], profile: AestheticProfile) -> float:
    """Similarity between already-cleaned tags and one profile."""
    if not tags:
        return 0.0
    profile_tags = [t.lower() for t in profile.descriptive_tags]
    # dict.fromkeys keeps first-seen order so vectors are reproducible
    vocabulary = list(dict.fromkeys([*tags, *profile_tags]))
    input_vector = _containment_vector(vocabulary, tags)
    profile_vector = _containment_vector(vocabulary, profile_tags)
    return cosine_similarity(input_vector, profile_vector)


class AestheticDetector:
    """Detects catalogued aesthetics from descriptive tags."""

    def __init__(
        self,
        profiles: Optional[Mapping[str, AestheticProfile]] = None,
        default_min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    ):
        self.profiles = profiles if profiles is not None else AESTHETIC_PROFILES
        self.default_min_confidence = default_min_confidence

    def score_all(self, input_tags: Iterable[str]) -> dict[str, float]:
        """Raw confidence for every profile, in catalog order."""
        tags = clean_tags(input_tags)
        return {
            profile_id: score_profile(tags, profile)
            for profile_id, profile in self.profiles.items()
        }

    def detect(
        self,
        input_tags: Iterable[str],
        min_confidence: Optional[float] = None,
    ) -> list[DetectionResult]:
        """Detect aesthetics matching the given tags.

        Args:
            input_tags: Descriptive tags from image analysis or text.
            min_confidence: Caller's minimum confidence. Defaults to the
                detector's default_min_confidence.

        Returns:
            Matches sorted by descending confidence. Empty when nothing
            clears its bar.
        """
        if min_confidence is None:
            min_confidence = self.default_min_confidence

        tags = clean_tags(input_tags)
        if not tags:
            return []

        results = []
        for profile_id, profile in self.profiles.items():
            confidence = score_profile(tags, profile)
            if confidence >= max(min_confidence, profile.confidence_threshold):
                results.append(
                    DetectionResult(
                        aesthetic_id=profile_id,
                        confidence=confidence,
                        profile=profile,
                    )
                )

        # Stable sort: equal confidences keep catalog order
        results.sort(key=lambda r: r.confidence, reverse=True)

        if results:
            detected = ", ".join(f"{r.aesthetic_id}={r.confidence:.3f}" for r in results)
            logger.debug(f"Detected {detected} from {len(tags)} tags")
        else:
            logger.debug(f"No aesthetic cleared its threshold for {len(tags)} tags")
        return results

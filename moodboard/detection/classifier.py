"""
Text fallback classifiers for free-text vibes.

Used when tag-similarity detection finds nothing. The chain is:
  1. AestheticDetector on the words of the vibe
  2. LLMVibeClassifier (local Ollama model), when configured
  3. KeywordVibeClassifier, which always answers
"""
import logging
import re
from typing import Mapping, Optional

import ollama
from pydantic import BaseModel, Field

from ..catalog import AESTHETIC_PROFILES
from ..models import AestheticProfile, DetectionResult
from .detector import AestheticDetector

logger = logging.getLogger(__name__)

# Word -> aesthetic id. Order matters: on equal match counts the aesthetic
# listed first wins.
VIBE_KEYWORDS: dict[str, str] = {
    "vintage": "girlblogger",
    "old": "girlblogger",
    "antique": "girlblogger",
    "film": "girlblogger",
    "polaroid": "girlblogger",
    "retro": "y2k_revival",
    "modern": "clean_girl",
    "minimal": "clean_girl",
    "clean": "clean_girl",
    "simple": "clean_girl",
    "white": "clean_girl",
    "bright": "clean_girl",
    "dark": "dark_academia",
    "black": "dark_academia",
    "shadow": "dark_academia",
    "book": "dark_academia",
    "library": "dark_academia",
    "study": "dark_academia",
    "pink": "coquette",
    "soft": "coquette",
    "cute": "coquette",
    "flower": "coquette",
    "bow": "coquette",
    "lace": "coquette",
    "pastel": "coquette",
    "neon": "cyber_fairy",
    "glow": "cyber_fairy",
    "led": "cyber_fairy",
    "holographic": "cyber_fairy",
    "iridescent": "cyber_fairy",
    "metallic": "cyber_fairy",
    "nature": "cottagecore",
    "forest": "cottagecore",
    "garden": "cottagecore",
    "cottage": "cottagecore",
    "rural": "cottagecore",
    "countryside": "cottagecore",
    "grunge": "indie_sleaze",
    "alternative": "indie_sleaze",
    "indie": "indie_sleaze",
    "edgy": "indie_sleaze",
    "rough": "indie_sleaze",
    "luxury": "old_money",
    "expensive": "old_money",
    "gold": "old_money",
    "elegant": "old_money",
    "sophisticated": "old_money",
    "preppy": "old_money",
    "beach": "coastal_grandmother",
    "ocean": "coastal_grandmother",
    "coastal": "coastal_grandmother",
    "nautical": "coastal_grandmother",
    "seaside": "coastal_grandmother",
    "toys": "kidcore",
    "rainbow": "kidcore",
    "cartoon": "kidcore",
    "chrome": "y2k_revival",
    "2000s": "y2k_revival",
}

KEYWORD_BASE_CONFIDENCE = 0.6
KEYWORD_STEP = 0.15
KEYWORD_MAX_CONFIDENCE = 0.9
NAME_MATCH_CONFIDENCE = 0.95
HASH_CONFIDENCE = 0.65

MIN_TAG_WORD_LENGTH = 4
STOP_WORDS = {"with", "from", "that", "this", "very", "kind", "vibe", "vibes", "like"}

SYSTEM_PROMPT = (
    "You are a fashion and internet-culture analyst. You classify a short "
    "free-text vibe description into known Gen Z aesthetics. Only use the "
    "aesthetic ids you are given. Respond in the exact JSON format requested."
)

CLASSIFY_PROMPT_TEMPLATE = """\
Vibe: "{vibe}"

Known aesthetics:
{catalog}

Pick up to 3 aesthetics from the list above that best match the vibe and
give each a confidence between 0.0 and 1.0.

Respond with JSON:
{{
  "aesthetics": [
    {{"aesthetic_id": "<id from the list>", "confidence": <float 0.0-1.0>}}
  ],
  "reasoning": "<1 sentence explanation>"
}}"""


class AestheticScore(BaseModel):
    aesthetic_id: str
    confidence: float


class VibeClassification(BaseModel):
    """LLM classification of a vibe into catalogued aesthetics."""
    aesthetics: list[AestheticScore] = Field(default_factory=list)
    reasoning: str = ""


def string_hash(text: str) -> int:
    """Deterministic 32-bit signed string hash (h * 31 + code point)."""
    h = 0
    for ch in text:
        h = (h * 31 + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def vibe_words(vibe: str) -> list[str]:
    """Split a vibe into lower-case words (keeps digits, e.g. "2000s")."""
    return re.findall(r"[a-z0-9]+", vibe.lower())


def vibe_tags(vibe: str) -> list[str]:
    """Tags for similarity detection: the whole vibe plus its longer words.

    Short words are dropped since substring matching would let "a" or "the"
    hit half the catalog.
    """
    words = [w for w in vibe_words(vibe) if len(w) >= MIN_TAG_WORD_LENGTH]
    return [vibe, *(w for w in words if w not in STOP_WORDS)]


class LLMVibeClassifier:
    """Classifies a vibe using a local LLM via Ollama."""

    def __init__(
        self,
        model: str = "qwen2.5:7b",
        profiles: Optional[Mapping[str, AestheticProfile]] = None,
    ):
        self.model = model
        self.profiles = profiles if profiles is not None else AESTHETIC_PROFILES

    def _catalog_listing(self) -> str:
        return "\n".join(
            f"- {p.id}: {p.name} ({p.description})" for p in self.profiles.values()
        )

    def classify(self, vibe: str) -> Optional[list[DetectionResult]]:
        """Classify a vibe into catalogued aesthetics.

        Returns:
            Detections sorted by descending confidence, or None when the
            model fails or names nothing usable.
        """
        prompt = CLASSIFY_PROMPT_TEMPLATE.format(
            vibe=vibe, catalog=self._catalog_listing()
        )

        try:
            response = ollama.chat(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                format=VibeClassification.model_json_schema(),
            )
            result = VibeClassification.model_validate_json(response.message.content)
        except Exception as e:
            logger.error(f"LLM classification failed for '{vibe[:50]}': {e}")
            return None

        detections: dict[str, DetectionResult] = {}
        for score in result.aesthetics:
            profile = self.profiles.get(score.aesthetic_id.strip().lower())
            if profile is None:
                logger.debug(f"Ignoring unknown aesthetic from LLM: {score.aesthetic_id}")
                continue
            confidence = max(0.0, min(1.0, score.confidence))
            existing = detections.get(profile.id)
            if existing is None or confidence > existing.confidence:
                detections[profile.id] = DetectionResult(profile.id, confidence, profile)

        if not detections:
            return None
        return sorted(detections.values(), key=lambda d: d.confidence, reverse=True)


class KeywordVibeClassifier:
    """Deterministic keyword classifier that always returns one aesthetic.

    A vibe naming a profile outright ("dark academia") maps to it directly.
    Otherwise each known word votes for its aesthetic; the aesthetic with
    the most votes wins. With no votes at all a string hash of the vibe
    picks a profile, so the same vibe always gets the same answer.
    """

    def __init__(
        self,
        keywords: Optional[Mapping[str, str]] = None,
        profiles: Optional[Mapping[str, AestheticProfile]] = None,
    ):
        self.keywords = keywords if keywords is not None else VIBE_KEYWORDS
        self.profiles = profiles if profiles is not None else AESTHETIC_PROFILES

    def _named_profile(self, vibe: str) -> Optional[AestheticProfile]:
        wanted = " ".join(vibe_words(vibe.replace("_", " ")))
        for profile in self.profiles.values():
            if wanted in (profile.name.lower(), profile.id.replace("_", " ")):
                return profile
        return None

    def classify(self, vibe: str) -> DetectionResult:
        named = self._named_profile(vibe)
        if named is not None:
            return DetectionResult(named.id, NAME_MATCH_CONFIDENCE, named)

        votes: dict[str, int] = {}
        words = set(vibe_words(vibe))
        for keyword, aesthetic_id in self.keywords.items():
            if keyword in words and aesthetic_id in self.profiles:
                votes[aesthetic_id] = votes.get(aesthetic_id, 0) + 1

        if votes:
            # max() keeps the first aesthetic on ties, i.e. table order
            aesthetic_id = max(votes, key=votes.get)
            confidence = min(
                KEYWORD_MAX_CONFIDENCE,
                KEYWORD_BASE_CONFIDENCE + KEYWORD_STEP * votes[aesthetic_id],
            )
            logger.debug(f"Keyword match for '{vibe}' -> {aesthetic_id}")
            return DetectionResult(aesthetic_id, confidence, self.profiles[aesthetic_id])

        ids = list(self.profiles)
        index = abs(string_hash(vibe.strip().lower())) % len(ids)
        aesthetic_id = ids[index]
        logger.debug(f"No keyword match for '{vibe}', hashed to {aesthetic_id}")
        return DetectionResult(aesthetic_id, HASH_CONFIDENCE, self.profiles[aesthetic_id])


def resolve_detections(
    vibe: str,
    detector: AestheticDetector,
    llm: Optional[LLMVibeClassifier] = None,
    min_confidence: Optional[float] = None,
    keyword_classifier: Optional[KeywordVibeClassifier] = None,
) -> list[DetectionResult]:
    """Turn a free-text vibe into detections. Never returns an empty list."""
    detections = detector.detect(vibe_tags(vibe), min_confidence)
    if detections:
        return detections

    if llm is not None:
        detections = llm.classify(vibe)
        if detections:
            logger.info(f"Vibe '{vibe}' classified by LLM")
            return detections

    keyword_classifier = keyword_classifier or KeywordVibeClassifier()
    result = keyword_classifier.classify(vibe)
    logger.info(
        f"Vibe '{vibe}' fell back to keyword classifier: "
        f"{result.aesthetic_id} ({result.confidence:.2f})"
    )
    return [result]

# Detection module
from .classifier import (
    KeywordVibeClassifier,
    LLMVibeClassifier,
    VibeClassification,
    resolve_detections,
    string_hash,
    vibe_tags,
)
from .detector import AestheticDetector, clean_tags, score_profile

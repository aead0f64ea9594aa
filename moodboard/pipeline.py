"""
Moodboard content pipeline.

Tags or a free-text vibe go in; ranked content per provider comes out:
  1. Detect aesthetics (tag similarity, falling back to the text classifiers)
  2. Project detections into per-provider parameters
  3. Aggregate every provider concurrently
"""
import logging
from dataclasses import asdict, dataclass, field
from typing import Iterable, Optional, Sequence

from .aggregation import MergePolicy, MultiProviderAggregator, merge_results
from .config import Settings, get_settings
from .detection import AestheticDetector, LLMVibeClassifier, resolve_detections
from .filters import ProductMode
from .models import DetectionResult, ProviderKind, RankedResultSet
from .projection import ProviderParameterProjector
from .providers import build_providers

logger = logging.getLogger(__name__)


@dataclass
class MoodboardContent:
    """Everything generated for one vibe."""
    vibe: str
    detections: list[DetectionResult]
    parameters: dict
    results: dict = field(default_factory=dict)  # ProviderKind -> RankedResultSet

    @property
    def total_items(self) -> int:
        return sum(len(r) for r in self.results.values())

    def merged(
        self, limit: int, policy: MergePolicy = MergePolicy.ROUND_ROBIN
    ) -> RankedResultSet:
        ordered = [self.results[k] for k in ProviderKind if k in self.results]
        return merge_results(ordered, limit, policy)

    def to_dict(self) -> dict:
        return {
            "vibe": self.vibe,
            "detections": [d.to_dict() for d in self.detections],
            "parameters": {
                kind.value: asdict(params) for kind, params in self.parameters.items()
            },
            "results": {
                kind.value: result.to_dict() for kind, result in self.results.items()
            },
            "total_items": self.total_items,
        }


class MoodboardPipeline:
    """Orchestrates detection, projection and aggregation."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        providers=None,
        detector: Optional[AestheticDetector] = None,
        projector: Optional[ProviderParameterProjector] = None,
        aggregator: Optional[MultiProviderAggregator] = None,
        llm: Optional[LLMVibeClassifier] = None,
    ):
        self.settings = settings or get_settings()
        self.detector = detector or AestheticDetector(
            default_min_confidence=self.settings.default_min_confidence
        )
        self.projector = projector or ProviderParameterProjector()
        if aggregator is None:
            if providers is None:
                providers = build_providers(self.settings)
            aggregator = MultiProviderAggregator(
                providers,
                timeout=self.settings.provider_timeout,
                request_delay=self.settings.request_delay,
                max_term_queries=self.settings.max_term_queries,
            )
        self.aggregator = aggregator
        if llm is None and self.settings.use_llm_classifier:
            llm = LLMVibeClassifier(model=self.settings.ollama_model)
        self.llm = llm

    def detect_aesthetics(
        self, tags: Iterable[str], min_confidence: Optional[float] = None
    ) -> list[DetectionResult]:
        """Tag-similarity detection. May be empty."""
        return self.detector.detect(tags, min_confidence)

    def resolve(self, vibe: str, tags: Optional[Sequence[str]] = None) -> list[DetectionResult]:
        """Detections for a vibe, trying image tags first. Never empty."""
        if tags:
            detections = self.detect_aesthetics(tags)
            if detections:
                return detections
            logger.info(f"No confident match for {len(tags)} tags, classifying vibe text")
        return resolve_detections(vibe, self.detector, llm=self.llm)

    async def generate_content(
        self,
        vibe: str,
        detections: Optional[Sequence[DetectionResult]] = None,
        limit: Optional[int] = None,
        kinds: Optional[Iterable[ProviderKind]] = None,
        product_mode: Optional[ProductMode] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> MoodboardContent:
        """Generate ranked content per provider for a vibe.

        Args:
            vibe: Free-text vibe; also used as the direct search query.
            detections: Pre-computed detections. Resolved from `tags` and
                the vibe when None.
            limit: Max items per provider (defaults to settings).
            kinds: Provider kinds to query (default: all).
            product_mode: Product filter mode for wishlist-style layouts.
            tags: Image-derived tags, tried before the vibe text.
        """
        if limit is None:
            limit = self.settings.default_limit
        if detections is None:
            detections = self.resolve(vibe, tags)
        detections = list(detections)

        parameters = self.projector.project(detections)
        results = await self.aggregator.aggregate_all(
            parameters, vibe, limit, kinds=kinds, product_mode=product_mode
        )
        content = MoodboardContent(
            vibe=vibe, detections=detections, parameters=parameters, results=results
        )
        aesthetics = ", ".join(d.aesthetic_id for d in detections) or "defaults"
        logger.info(f"Generated {content.total_items} items for '{vibe}' ({aesthetics})")
        return content

    async def generate_content_for_vibe(
        self,
        vibe: str,
        detections: Optional[Sequence[DetectionResult]] = None,
        limit: Optional[int] = None,
        merge: MergePolicy = MergePolicy.ROUND_ROBIN,
        product_mode: Optional[ProductMode] = None,
    ) -> RankedResultSet:
        """Single unified feed of at most `limit` items across providers."""
        if limit is None:
            limit = self.settings.default_limit
        content = await self.generate_content(
            vibe, detections, limit=limit, product_mode=product_mode
        )
        return content.merged(limit, merge)

    async def close(self) -> None:
        for provider in self.aggregator.providers.values():
            await provider.close()

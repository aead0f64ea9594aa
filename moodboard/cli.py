#!/usr/bin/env python3
"""
CLI for the moodboard engine

Usage:
    python -m moodboard.cli catalog
    python -m moodboard.cli detect vintage "film photography" melancholy
    python -m moodboard.cli project vintage "film photography" melancholy
    python -m moodboard.cli classify "dark academia library"
    python -m moodboard.cli generate "coastal grandmother" --limit 10
    python -m moodboard.cli --json generate "y2k" --providers music film
"""
import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict

from .aggregation import MergePolicy
from .catalog import AESTHETIC_PROFILES
from .config import get_settings
from .detection import (
    AestheticDetector,
    LLMVibeClassifier,
    resolve_detections,
)
from .filters import ProductMode
from .models import ProviderKind
from .pipeline import MoodboardPipeline
from .projection import ProviderParameterProjector

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Moodboard aesthetic detection and content CLI"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "catalog",
        help="List catalogued aesthetic profiles"
    )

    detect_parser = subparsers.add_parser(
        "detect",
        help="Detect aesthetics from descriptive tags"
    )
    detect_parser.add_argument("tags", nargs="+", help="Descriptive tags")
    detect_parser.add_argument(
        "--min-confidence",
        type=float,
        default=None,
        help="Minimum confidence (default: from settings)"
    )

    project_parser = subparsers.add_parser(
        "project",
        help="Show provider parameters projected from descriptive tags"
    )
    project_parser.add_argument("tags", nargs="+", help="Descriptive tags")
    project_parser.add_argument(
        "--min-confidence",
        type=float,
        default=None,
        help="Minimum confidence (default: from settings)"
    )

    classify_parser = subparsers.add_parser(
        "classify",
        help="Classify a free-text vibe (detector, LLM, keyword fallback)"
    )
    classify_parser.add_argument("vibe", help="Free-text vibe")
    classify_parser.add_argument(
        "--llm",
        action="store_true",
        help="Try the local Ollama model before the keyword fallback"
    )

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate ranked content for a vibe"
    )
    generate_parser.add_argument("vibe", help="Free-text vibe")
    generate_parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Max items per provider (default: from settings)"
    )
    generate_parser.add_argument(
        "--providers",
        nargs="+",
        choices=[k.value for k in ProviderKind],
        default=None,
        help="Provider kinds to query (default: all)"
    )
    generate_parser.add_argument(
        "--tags",
        nargs="+",
        default=None,
        help="Image-derived tags to detect from before using the vibe text"
    )
    generate_parser.add_argument(
        "--product-mode",
        choices=[m.value for m in ProductMode],
        default=None,
        help="Apply the product filter (wishlist layouts)"
    )
    generate_parser.add_argument(
        "--merge",
        choices=[p.value for p in MergePolicy],
        default=None,
        help="Also output a single merged feed using this policy"
    )

    return parser.parse_args(argv)


def cmd_catalog(args) -> dict:
    """Execute the catalog command."""
    return {
        "command": "catalog",
        "count": len(AESTHETIC_PROFILES),
        "aesthetics": [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "threshold": p.confidence_threshold,
            }
            for p in AESTHETIC_PROFILES.values()
        ]
    }


def cmd_detect(args) -> dict:
    """Execute the detect command."""
    settings = get_settings()
    detector = AestheticDetector(default_min_confidence=settings.default_min_confidence)
    detections = detector.detect(args.tags, args.min_confidence)
    return {
        "command": "detect",
        "tags": args.tags,
        "detections": [d.to_dict() for d in detections],
    }


def cmd_project(args) -> dict:
    """Execute the project command."""
    settings = get_settings()
    detector = AestheticDetector(default_min_confidence=settings.default_min_confidence)
    detections = detector.detect(args.tags, args.min_confidence)
    parameters = ProviderParameterProjector().project(detections)
    return {
        "command": "project",
        "detections": [d.to_dict() for d in detections],
        "parameters": {
            kind.value: asdict(params) for kind, params in parameters.items()
        },
    }


def cmd_classify(args) -> dict:
    """Execute the classify command."""
    settings = get_settings()
    detector = AestheticDetector(default_min_confidence=settings.default_min_confidence)
    llm = None
    if args.llm or settings.use_llm_classifier:
        llm = LLMVibeClassifier(model=settings.ollama_model)
    detections = resolve_detections(args.vibe, detector, llm=llm)
    return {
        "command": "classify",
        "vibe": args.vibe,
        "detections": [d.to_dict() for d in detections],
    }


async def cmd_generate(args, pipeline=None) -> dict:
    """Execute the generate command."""
    pipeline = pipeline or MoodboardPipeline()
    kinds = [ProviderKind(k) for k in args.providers] if args.providers else None
    product_mode = ProductMode(args.product_mode) if args.product_mode else None
    try:
        content = await pipeline.generate_content(
            args.vibe,
            limit=args.limit,
            kinds=kinds,
            product_mode=product_mode,
            tags=args.tags,
        )
    finally:
        await pipeline.close()

    result = {"command": "generate", **content.to_dict()}
    if args.merge:
        limit = args.limit if args.limit is not None else pipeline.settings.default_limit
        result["merged"] = content.merged(limit, MergePolicy(args.merge)).to_dict()
    return result


async def main():
    """Main entry point."""
    args = parse_args()

    if args.command == "catalog":
        result = cmd_catalog(args)
    elif args.command == "detect":
        result = cmd_detect(args)
    elif args.command == "project":
        result = cmd_project(args)
    elif args.command == "classify":
        result = cmd_classify(args)
    elif args.command == "generate":
        result = await cmd_generate(args)
    else:
        logger.error(f"Unknown command: {args.command}")
        sys.exit(1)

    # Output results
    if args.json:
        print(json.dumps(result, indent=2, default=str))
        return

    print(f"\n{'=' * 50}")
    print(f"Command: {result['command']}")
    print(f"{'=' * 50}")

    if args.command == "catalog":
        print(f"Aesthetics: {result['count']}")
        for a in result["aesthetics"]:
            print(f"  {a['id']:<20} | {a['name']:<20} | threshold {a['threshold']:.2f}")

    elif args.command in ("detect", "classify"):
        if not result["detections"]:
            print("No aesthetic cleared its confidence threshold.")
        for d in result["detections"]:
            print(f"  [{d['confidence']:.3f}] {d['name']} ({d['aesthetic']})")

    elif args.command == "project":
        if not result["detections"]:
            print("No detections, showing default parameters.")
        for kind, params in result["parameters"].items():
            print(f"\n  {kind}:")
            for key, value in params.items():
                print(f"    {key}: {value}")

    elif args.command == "generate":
        print(f"Vibe: {result['vibe']}")
        print("Detected: " + ", ".join(
            f"{d['name']} ({d['confidence']:.2f})" for d in result["detections"]
        ))
        for kind, rs in result["results"].items():
            print(f"\n  {kind}: {rs['total']} items from {rs['candidates_found']} candidates")
            if rs["failed_strategies"]:
                print(f"    Failed: {', '.join(rs['failed_strategies'])}")
            for i, item in enumerate(rs["items"], 1):
                print(f"    #{i} [{item['score']:.4f}] {item['title'][:60]}")
                if item["attribution"]:
                    print(f"        by {item['attribution'][:50]}")
        if "merged" in result:
            merged = result["merged"]
            print(f"\n  Merged feed: {merged['total']} items")
            for i, item in enumerate(merged["items"], 1):
                print(f"    #{i} [{item['provider']}] {item['title'][:60]}")

    print(f"{'=' * 50}\n")


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()

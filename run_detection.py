"""
Command-line runner for the PII detector.

Reads:
  - a .txt file (scanned as a single segment), or
  - a .json list of leaves: {"leaf_id", "text", "container", "hidden", "inside_link", "role"}

Produces:
  - a printed summary of published entities (or resolved candidates with --debug)
  - optionally, the JSON result written to --output
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from piiscan.config import settings
from piiscan.config.detection_config import load_detection_config
from piiscan.detection.detector import PIIDetector
from piiscan.detection.output_builder import to_payload, validate_detection_output
from piiscan.models.text_map import DocumentLeaf

logger = logging.getLogger("run_detection")


def load_document(path: Path) -> List[DocumentLeaf]:
    """Read a .txt or .json input file into document leaves."""
    if path.suffix.lower() != ".json":
        with open(path, encoding="utf-8") as f:
            return [DocumentLeaf(leaf_id=path.stem, text=f.read())]

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON list of leaves")
    return [
        DocumentLeaf(
            leaf_id=str(item.get("leaf_id", f"leaf-{i}")),
            text=item.get("text", ""),
            container=item.get("container", ""),
            hidden=bool(item.get("hidden", False)),
            inside_link=bool(item.get("inside_link", False)),
            role=item.get("role", ""),
        )
        for i, item in enumerate(raw)
    ]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Detect PII in a text or JSON leaf file.")
    parser.add_argument("input", type=Path, help="Input .txt or .json file")
    parser.add_argument("--types", nargs="*", default=None, help="Enabled types (default: all)")
    parser.add_argument("--threshold", type=float, default=None, help="Proper-noun threshold override")
    parser.add_argument("--config", default=None, help="JSON config override (path or inline JSON)")
    parser.add_argument("--debug", action="store_true", help="Show resolved candidates without thresholds")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON result to this path")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
        stream=sys.stdout,
    )

    config = load_detection_config(args.config)
    detector = PIIDetector(config).initialize()
    if args.threshold is not None:
        detector.set_proper_noun_threshold(args.threshold)

    leaves = load_document(args.input)
    logger.info("input             : %s", args.input)
    logger.info("leaves            : %d", len(leaves))

    if args.debug:
        results = detector.detect_with_debug(leaves, args.types)
        payload = [r.model_dump(mode="json") for r in results]
        print("\n" + "=" * 60)
        print(f"RESOLVED CANDIDATES: {len(results)}")
        print("=" * 60)
        for r in results:
            mark = "" if r.will_be_protected is not False else "  (below threshold)"
            print(f"  [{r.type:<11}] {r.confidence:.2f}  {r.text!r}{mark}")
    else:
        entities = detector.detect_document(leaves, args.types)
        payload = to_payload(entities)
        errors = validate_detection_output(payload)
        if errors:
            for err in errors:
                logger.error("Output schema error: %s", err)
            return 1

        stats = detector.get_stats(entities)
        print("\n" + "=" * 60)
        print(f"ENTITIES: {stats.total}   avg confidence: {stats.avg_confidence:.2f}")
        print("=" * 60)
        for pii_type, count in sorted(stats.by_type.items()):
            print(f"  {pii_type:<11} {count}")
        print("-" * 60)
        for e in entities:
            print(f"  {e.id:<7} [{e.type:<11}] {e.confidence:.2f}  {e.text!r}  x{len(e.occurrences)}")

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        logger.info("Output written to: %s", args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())

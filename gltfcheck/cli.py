# gltfcheck command-line linter
#
# Usage:
#   gltfcheck model.gltf
#   gltfcheck --strict --json scenes/*.gltf
#   gltfcheck --report report.json https://example.com/duck.gltf
#
# Exit codes:
#   0  every document is valid (and, with --strict, free of warnings)
#   1  at least one document has errors (or warnings with --strict)
#   2  at least one source could not be loaded

from __future__ import annotations

import argparse
import datetime
import json
import logging
import sys
import time
from typing import Any, Dict, List, Optional

from .core.errors import DocumentLoadError
from .utils.config import LOG_LEVELS, OUTPUT_FORMATS, CheckConfig, load_config
from .utils.loader import load_document
from .validation.validator import validate_gltf

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_LOAD_FAILED = 2


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gltfcheck", description="Validate glTF 1.0 documents")
    ap.add_argument("sources", nargs="+", help="Paths or http(s) URLs of .gltf documents")
    ap.add_argument("--strict", action="store_true", default=None, help="Treat warnings as failures")
    ap.add_argument("--json", dest="output_format", action="store_const", const="json", default=None,
                    help="Print the report as JSON")
    ap.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, help="Report format")
    ap.add_argument("--log-level", choices=LOG_LEVELS, default=None, help="Log level of the gltfcheck logger")
    ap.add_argument("--timeout", type=float, default=None, help="Network timeout in seconds for URL sources")
    ap.add_argument("--report", type=str, default="", help="Also write the JSON report to this file")
    return ap


def check_source(source: str, config: CheckConfig) -> Dict[str, Any]:
    """Load and validate one source; returns a JSON-serializable entry."""
    entry: Dict[str, Any] = {"source": source}
    t_start = time.perf_counter()
    try:
        gltf = load_document(source, timeout_sec=config.request_timeout_sec)
    except DocumentLoadError as e:
        entry["loaded"] = False
        entry["error"] = str(e)
        entry["ok"] = False
        return entry

    result = validate_gltf(gltf)
    entry["loaded"] = True
    entry["ok"] = result.is_valid and not (config.strict and result.has_warnings())
    entry["duration_sec"] = round(time.perf_counter() - t_start, 3)
    entry["result"] = result
    return entry


def _print_text(entries: List[Dict[str, Any]]) -> None:
    for entry in entries:
        status = "OK" if entry["ok"] else "FAIL"
        print(f"== {entry['source']}: {status}")
        if not entry["loaded"]:
            print(f"   {entry['error']}")
            continue
        for line in entry["result"].to_display_string().splitlines():
            print(f"   {line}")


def _to_report(entries: List[Dict[str, Any]], config: CheckConfig) -> Dict[str, Any]:
    documents = []
    for entry in entries:
        doc = {k: v for k, v in entry.items() if k != "result"}
        if entry.get("loaded"):
            doc.update(entry["result"].to_dict())
        documents.append(doc)
    return {
        "ts_iso": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "strict": config.strict,
        "total_documents": len(entries),
        "failures": sum(1 for e in entries if not e["ok"]),
        "documents": documents,
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config().override(
        strict=args.strict,
        output_format=args.output_format,
        log_level=args.log_level,
        request_timeout_sec=args.timeout,
    )
    logging.getLogger("gltfcheck").setLevel(config.log_level)

    entries = [check_source(source, config) for source in args.sources]
    report = _to_report(entries, config)

    if config.output_format == "json":
        print(json.dumps(report, indent=2))
    else:
        _print_text(entries)

    if args.report:
        try:
            with open(args.report, "w", encoding="utf-8") as f:
                json.dump(report, f, indent=2)
            print(f"Saved report: {args.report}", file=sys.stderr)
        except OSError as ex:
            print(f"Warning: failed to save report: {ex}", file=sys.stderr)

    if any(not e["loaded"] for e in entries):
        return EXIT_LOAD_FAILED
    if any(not e["ok"] for e in entries):
        return EXIT_INVALID
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

"""Command line entry point for apidiff."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .engine import ApiDiffEngine
from .exceptions import DocumentLoadError
from .loader import load_document
from .models import EngineConfig, LogLevel, OutputFormat, ErrorResponse

EXIT_OK = 0
EXIT_CHANGES = 1
EXIT_ERROR = 2


class ReportDumper(yaml.SafeDumper):
    """Safe dumper that writes shared objects out in full instead of as aliases."""

    def ignore_aliases(self, data):
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apidiff",
        description="Structural diff between two API contract documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  apidiff base.yaml head.yaml
  apidiff base.yaml head.yaml -f yaml -o report.yaml
  apidiff base.json head.json --ignore "$.paths['/internal']" --exit-code
        """
    )

    parser.add_argument("base", help="Path to the base YAML/JSON document")
    parser.add_argument("head", help="Path to the head YAML/JSON document")
    parser.add_argument("-o", "--output", help="Write the report to this file instead of stdout")
    parser.add_argument(
        "-f", "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.JSON.value,
        help="Report format (default: json)"
    )
    parser.add_argument(
        "-i", "--ignore",
        action="append",
        default=[],
        metavar="JSONPATH",
        help="JSONPath of a document region to leave out of the diff (repeatable)"
    )
    parser.add_argument(
        "--legacy-rollup",
        action="store_true",
        help="Ignore parameter and request body changes when deciding whether an operation changed"
    )
    parser.add_argument(
        "--no-items",
        action="store_true",
        help="Report only the keys of added/removed entries"
    )
    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="Exit with status 1 when the documents differ"
    )
    parser.add_argument(
        "--log-level",
        choices=[level.name for level in LogLevel],
        default=EngineConfig().log_level.name,
        help="Logging verbosity, written to stderr (default: INFO)"
    )
    return parser


def render(data: dict, output_format: OutputFormat) -> str:
    if output_format == OutputFormat.YAML:
        return yaml.dump(
            data,
            Dumper=ReportDumper,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    return json.dumps(data, indent=2, ensure_ascii=False, default=str) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = LogLevel[args.log_level]
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = EngineConfig(
        ignore_paths=args.ignore,
        legacy_operation_rollup=args.legacy_rollup,
        include_items=not args.no_items,
        log_level=log_level,
    )

    try:
        base_doc = load_document(args.base)
        head_doc = load_document(args.head)
    except DocumentLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    result = ApiDiffEngine(config).compare(base_doc, head_doc)
    output = render(result.to_dict(), OutputFormat(args.format))

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    if isinstance(result, ErrorResponse):
        print(f"Error: {result.error['message']}", file=sys.stderr)
        return EXIT_ERROR
    if args.exit_code and result.has_changes:
        return EXIT_CHANGES
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

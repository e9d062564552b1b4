#!/usr/bin/env python3
"""
threat-entities - CLI entry point
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from collections.abc import Iterator
from typing import Any, Optional

from .config import configure_logging, load_settings
from .entity import normalize_attributes
from .errors import ConfigError
from .fingerprint import fingerprint
from .output import (
    EXIT_OK,
    EXIT_REJECTED,
    EXIT_USAGE,
    exit_code_from_outcomes,
    format_pretty,
    outcome_record,
)
from .registry import TypeRegistry, build_registry
from .validate import validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="threat-entities",
        description="Validate and canonicalize threat-intelligence values",
    )
    parser.add_argument("--env-file", default=None, help="Read settings from this .env file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override THREAT_ENTITIES_LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate values against a type name")
    p_validate.add_argument("type", help="Type name (e.g. ip, domain, md5)")
    p_validate.add_argument("value", nargs="?", help="Value to validate (optional if using --file)")
    p_validate.add_argument(
        "--file", "-f", default=None, help="File with values to validate (one per line)"
    )
    p_validate.add_argument(
        "--json", "-j", action="store_true", help="Output as JSON (alias for --format json)"
    )
    p_validate.add_argument(
        "--format",
        choices=["pretty", "json", "ndjson"],
        default=None,
        help="Output format (default: pretty; --json is an alias for json)",
    )

    p_fp = sub.add_parser("fingerprint", help="Print the SHA3-256 fingerprint of a value")
    p_fp.add_argument("value")

    p_types = sub.add_parser("types", help="List known type names")
    p_types.add_argument("--json", "-j", action="store_true", help="Output as JSON")

    p_norm = sub.add_parser(
        "normalize", help="Normalize a JSON object of raw attributes (file or stdin)"
    )
    p_norm.add_argument("path", nargs="?", default=None, help="JSON file (default: stdin)")

    return parser


def iter_values_from_file(filepath: str) -> Iterator[str]:
    """Yield values from a file (streaming).

    Skips empty lines and comments.
    """
    with open(filepath, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                yield line


def _error(message: str) -> int:
    print(f"error: {message}", file=sys.stderr)
    return EXIT_USAGE


def cmd_validate(args: argparse.Namespace, registry: TypeRegistry) -> int:
    if args.type not in registry:
        return _error(f"unknown type: {args.type}")

    out_format = args.format or ("json" if args.json else "pretty")
    values = iter_values_from_file(args.file) if args.file else iter([args.value])

    outcomes = []
    records: list[dict[str, Any]] = []
    try:
        for raw in values:
            outcome = validate(raw, args.type, registry=registry)
            outcomes.append(outcome)
            if out_format == "ndjson":
                print(json.dumps(outcome_record(raw, outcome), ensure_ascii=False))
            elif out_format == "json":
                records.append(outcome_record(raw, outcome))
            else:
                print(format_pretty(raw, outcome))
    except OSError as e:
        return _error(f"cannot read values: {e}")

    if out_format == "json":
        payload: Any = records if args.file else records[0]
        print(json.dumps(payload, indent=2, ensure_ascii=False))

    return exit_code_from_outcomes(outcomes)


def cmd_fingerprint(args: argparse.Namespace) -> int:
    print(fingerprint(args.value))
    return EXIT_OK


def cmd_types(args: argparse.Namespace, registry: TypeRegistry) -> int:
    names = registry.list_names()
    if args.json:
        payload = [{"name": n, "kind": registry.resolve(n).value} for n in names]
        print(json.dumps(payload, indent=2))
    else:
        width = max((len(n) for n in names), default=0)
        for n in names:
            print(f"{n:<{width}}  {registry.resolve(n).value}")
    return EXIT_OK


def cmd_normalize(args: argparse.Namespace, registry: TypeRegistry) -> int:
    try:
        if args.path:
            with open(args.path, encoding="utf-8") as f:
                raw = json.load(f)
        else:
            raw = json.load(sys.stdin)
    except (OSError, json.JSONDecodeError) as e:
        return _error(f"cannot read attributes: {e}")

    if not isinstance(raw, dict):
        return _error("expected a JSON object of attributes")

    attrs, errors = normalize_attributes(raw, registry=registry)
    print(json.dumps({"attributes": attrs.export(), "errors": errors}, indent=2, ensure_ascii=False))
    return EXIT_REJECTED if errors else EXIT_OK


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "validate" and args.value is None and not args.file:
        parser.error("Either VALUE or --file is required")

    try:
        settings = load_settings(env_file=args.env_file)
    except ConfigError as e:
        raise SystemExit(_error(str(e))) from None
    if args.log_level:
        settings = dataclasses.replace(settings, log_level=args.log_level)
    configure_logging(settings)

    registry = build_registry(settings)

    if args.command == "validate":
        exit_code = cmd_validate(args, registry)
    elif args.command == "fingerprint":
        exit_code = cmd_fingerprint(args)
    elif args.command == "types":
        exit_code = cmd_types(args, registry)
    else:
        exit_code = cmd_normalize(args, registry)

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()

"""CLI entrypoint for setclass."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from setclass import __version__
from setclass.conditions import load_conditions, validate_conditions_file
from setclass.config import load_options, merge_options, validate_config_file
from setclass.constants.branding import CLI_DESCRIPTION
from setclass.constants.reporting import OUTPUT_FORMAT_JSON, OUTPUT_FORMAT_TEXT, VALID_OUTPUT_FORMATS
from setclass.exceptions import ConditionError, ConfigError, SetClassError
from setclass.exceptions.validation import format_errors
from setclass.resolver import ResolverFactory
from setclass.types.common import PropValue


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="setclass",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve a conditions file into a class string")
    resolve.add_argument("-C", "--conditions", type=Path, required=True, help="YAML conditions file")
    resolve.add_argument(
        "-P",
        "--prop",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Property value (repeat flag for multiple values; values are parsed as YAML scalars)",
    )
    resolve.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding setclass.yaml")
    resolve.add_argument("-c", "--config", type=Path, help="Explicit config file")
    resolve.add_argument("--prefix", default=None, help="Prefix applied to every class word")
    resolve.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render an annotated trace instead of a class string",
    )
    resolve.add_argument(
        "--output-format",
        choices=VALID_OUTPUT_FORMATS,
        default=OUTPUT_FORMAT_TEXT,
        help="Output format: text (default) or json",
    )
    resolve.add_argument("-v", "--verbose", action="store_true", help="Show cache stats and diagnostics")

    validate = subparsers.add_parser("validate", help="Validate a conditions file and configuration")
    validate.add_argument("-C", "--conditions", type=Path, required=True, help="YAML conditions file")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding setclass.yaml")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def parse_property(raw: str) -> tuple[str, PropValue]:
    """Split a ``KEY=VALUE`` argument, parsing the value as a YAML scalar."""
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise ConfigError(f"Property must look like KEY=VALUE, got {raw!r}")
    if value == "":
        return key, ""
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return key, value
    if parsed is None or isinstance(parsed, (str, bool, int, float)):
        return key, parsed
    return key, value


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return _handle_validate(args)

    if args.command != "resolve":
        parser.error(f"Unsupported command: {args.command}")

    try:
        return _handle_resolve(args)
    except (ConfigError, ConditionError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SetClassError as exc:
        print(f"Resolver error: {exc}", file=sys.stderr)
        return 1


def _handle_resolve(args: argparse.Namespace) -> int:
    properties = dict(parse_property(raw) for raw in args.prop)
    options = merge_options(load_options(args.root, args.config), prefix=args.prefix, debug=args.debug)
    conditions = load_conditions(args.conditions)

    factory = ResolverFactory()
    resolver = factory.create(properties, options)

    if args.output_format == OUTPUT_FORMAT_JSON:
        payload = resolver.explain(conditions).to_dict()
        payload["properties"] = dict(resolver.properties)
        print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False))
    else:
        print(resolver.resolve(conditions))

    if args.verbose:
        print(f"resolver cache: {factory.cache.stats()}", file=sys.stderr)
        print(f"resolution cache: {resolver.cache.stats()}", file=sys.stderr)
    return 0


def _handle_validate(args: argparse.Namespace) -> int:
    """Run config + conditions validation and report results."""
    errors = validate_config_file(args.root, args.config, config_explicit=args.config is not None)
    errors.extend(validate_conditions_file(args.conditions))
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Conditions are valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Command line entry points for inspecting an audio effects configuration.

Usage examples:

- Validate the configuration found in the default locations:
    python -m audio_effects_config check

- Fail when any element had to be skipped:
    python -m audio_effects_config check /vendor/etc/audio_effects.xml --strict

- Print the parsed configuration as YAML (or JSON):
    python -m audio_effects_config dump audio_effects.xml --format json
"""

from __future__ import annotations

import argparse
import json
import sys

import yaml

from .debug_utils import configure_logging
from .loader import parse
from .models import ParseReport

EXIT_OK = 0
EXIT_DOCUMENT_ERROR = 1
EXIT_SKIPPED_ELEMENTS = 2


def _summary(report: ParseReport) -> str:
    config = report.config
    if config is None:
        return f"{report.source_path}: could not be parsed"
    return (
        f"{report.source_path}: version {config.version}, "
        f"{len(config.libraries)} libraries, {len(config.effects)} effects, "
        f"{len(config.preprocess)} preprocess, {len(config.postprocess)} postprocess, "
        f"{len(config.deviceprocess)} device streams, "
        f"{report.skipped_element_count} skipped"
    )


def _cmd_check(args: argparse.Namespace) -> int:
    report = parse(args.path)
    print(_summary(report))
    if not report.succeeded:
        return EXIT_DOCUMENT_ERROR
    if args.strict and report.skipped_element_count:
        return EXIT_SKIPPED_ELEMENTS
    return EXIT_OK


def _cmd_dump(args: argparse.Namespace) -> int:
    report = parse(args.path)
    if report.config is None:
        print(_summary(report), file=sys.stderr)
        return EXIT_DOCUMENT_ERROR
    payload = report.config.as_dict()
    if args.format == "json":
        print(json.dumps(payload, indent=2))
    else:
        print(yaml.safe_dump(payload, sort_keys=False), end="")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Inspect audio effects configuration files.")
    subparsers = ap.add_subparsers(dest="command")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Configuration file (defaults to audio_effects.xml in the standard locations)",
    )
    common.add_argument("-v", "--verbose", action="store_true", help="Log every skipped element")

    check_parser = subparsers.add_parser(
        "check", parents=[common], help="Parse the configuration and print a summary."
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_SKIPPED_ELEMENTS} when any element was skipped.",
    )
    check_parser.set_defaults(func=_cmd_check)

    dump_parser = subparsers.add_parser(
        "dump", parents=[common], help="Print the parsed configuration."
    )
    dump_parser.add_argument("--format", choices=("yaml", "json"), default="yaml")
    dump_parser.set_defaults(func=_cmd_dump)

    return ap


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    ap = _build_parser()

    if argv and argv[0] not in {"check", "dump", "-h", "--help"}:
        argv = ["check"] + argv

    args = ap.parse_args(argv)

    handler = getattr(args, "func", None)
    if handler is None:
        ap.print_help()
        return EXIT_OK

    configure_logging(verbose=args.verbose)
    return handler(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

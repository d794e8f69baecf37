#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List

from descriptors.batch import normalize_all
from descriptors.config import ConfigError, load_config
from descriptors.context import NormalizeContext
from descriptors.ir import ParseOutcome
from descriptors.logging import Logger
from descriptors.parser import DescriptorError
from descriptors.reporting.json_report import TOOL_VERSION, build_json_report, write_json_report
from descriptors.util.strings import desc_to_java_name


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="mdnorm - method descriptor normalizer")
    parser.add_argument("descriptors", nargs="*", help="Descriptors in JAR or mapping notation")
    parser.add_argument("--file", help="Read descriptors from a file, one per line")
    parser.add_argument("--config", help="YAML config path")
    parser.add_argument("--out", help="JSON report output path")
    parser.add_argument("--strict", action="store_true", help="Abort on the first malformed descriptor")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    return parser.parse_args(argv)


def _read_lines(path: str, encoding: str) -> List[str]:
    with open(path, "r", encoding=encoding) as f:
        return f.read().splitlines()


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    logger = Logger(verbose=args.verbose)

    logger.info(f"mdnorm v{TOOL_VERSION}")

    try:
        config = load_config(args.config)
    except (ConfigError, OSError, UnicodeDecodeError) as exc:
        logger.warn(f"config failed path={args.config} error={exc}")
        return 2
    if args.strict:
        config.on_error = "abort"
    config.verbose = args.verbose

    lines = list(args.descriptors)
    if args.file:
        try:
            lines.extend(_read_lines(args.file, config.encoding))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warn(f"input failed path={args.file} error={exc}")
            return 2
    if not lines:
        logger.warn("no descriptors given; pass them as arguments or use --file")
        return 2

    ctx = NormalizeContext(config=config, logger=logger)
    logger.info(f"normalizing on_error={config.on_error} lines={len(lines)}")
    try:
        outcomes = normalize_all(lines, ctx)
    except DescriptorError as exc:
        logger.warn(f"aborted input={exc.descriptor!r}")
        return 1

    if args.out:
        write_json_report(args.out, build_json_report(outcomes, config))

    stats = ctx.metrics.get("batch", {})
    logger.info(
        "descriptors "
        f"total={stats.get('total', 0)} "
        f"parsed={stats.get('parsed', 0)} "
        f"failed={stats.get('failed', 0)}"
    )
    logger.info(f"notation jar={stats.get('jar', 0)} mapping={stats.get('mapping', 0)}")
    logger.success(f"report json={args.out or 'n/a'}")

    print()
    _print_descriptor_table(outcomes)
    _print_errors(outcomes)

    return 0 if stats.get("failed", 0) == 0 else 1


def _print_descriptor_table(outcomes: List[ParseOutcome]) -> None:
    parsed = [o for o in outcomes if o.ok]
    if not parsed:
        print("Descriptors: none")
        return

    headers = ["LINE", "NOTATION", "INPUT", "DESCRIPTOR", "RETURNS"]
    rows = []
    for o in parsed:
        returns = desc_to_java_name(o.descriptor.return_type) or "-"
        rows.append([str(o.line), o.notation.value, o.raw, o.descriptor.render(), returns])

    max_widths = [6, 8, 60, 60, 40]
    widths = []
    for idx, header in enumerate(headers):
        max_len = max(len(header), max(len(r[idx]) for r in rows))
        widths.append(min(max_len, max_widths[idx]))

    header_line = "  ".join(_clip(headers[i], widths[i]).ljust(widths[i]) for i in range(len(headers)))
    sep_line = "  ".join("-" * widths[i] for i in range(len(headers)))
    print(header_line)
    print(sep_line)
    for row in rows:
        line = "  ".join(_clip(row[i], widths[i]).ljust(widths[i]) for i in range(len(headers)))
        print(line)


def _print_errors(outcomes: List[ParseOutcome]) -> None:
    failed = [o for o in outcomes if not o.ok]
    if not failed:
        return
    print()
    print("Errors:")
    for o in failed:
        print(f"  line {o.line}: {type(o.error).__name__}: {o.error}")


def _clip(value: str, width: int) -> str:
    if len(value) <= width:
        return value
    if width <= 3:
        return value[:width]
    return value[: width - 3] + "..."


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())

# SPDX-License-Identifier: MIT
"""
leakscan - Command Line Interface

This CLI provides:
- leakscan version
- leakscan scan <path> [-v] [-o report.json] [--sarif report.sarif] [--format {text,json}]
- leakscan rules
- leakscan init [path]

Exit codes for scan: 0 clean, 1 HIGH present, 2 CRITICAL present, 3 error.

Note:
- All example strings have been sanitized to avoid triggering detectors.
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .core.exceptions import ConfigError, PathNotFoundError, ReportWriteError
from .detectors import build_registry
from .policy import EXIT_CLEAN, EXIT_ERROR, exit_code_for
from .report.json_export import export_json, report_to_json
from .report.text import render_rules, render_text
from .sarif.export import export_sarif
from .scanner.config import CONFIG_FILENAMES, create_default_config_template, load_scanner_config
from .scanner.core import Scanner


def _positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser():
    p = argparse.ArgumentParser(prog="leakscan", description="Scan a directory tree for secrets and credentials")
    p.add_argument("-V", "--version", action="store_true", help="print version and exit")

    sub = p.add_subparsers(dest="cmd")
    sub.add_parser("version", help="print version")

    sp = sub.add_parser("scan", help="scan a directory for secrets")
    sp.add_argument("root", help="directory to scan")
    sp.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="print each file as it is scanned and show warnings"
    )
    sp.add_argument(
        "-o", "--output",
        help="write findings as JSON to this file"
    )
    sp.add_argument(
        "--sarif",
        dest="sarif_out",
        help="write findings as SARIF to this file"
    )
    sp.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="stdout format (default: text)"
    )
    sp.add_argument(
        "--config",
        help="path to a leakscan YAML config (default: <root>/.leakscan.yml)"
    )
    sp.add_argument(
        "-j", "--jobs",
        type=_positive_int,
        help="number of files scanned in parallel"
    )

    rp = sub.add_parser("rules", help="list the active secret patterns")
    rp.add_argument("--config", help="path to a leakscan YAML config")

    ip = sub.add_parser("init", help="write a starter .leakscan.yml")
    ip.add_argument("root", nargs="?", default=".", help="directory to write the config into")
    ip.add_argument("--force", action="store_true", help="overwrite an existing config")
    return p


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    p = build_parser()
    args = p.parse_args(argv)

    if args.version or args.cmd == "version":
        print(__version__)
        return EXIT_CLEAN

    if args.cmd == "scan":
        return handle_scan_command(args)
    if args.cmd == "rules":
        return handle_rules_command(args)
    if args.cmd == "init":
        return handle_init_command(args)

    p.print_help()
    return EXIT_CLEAN


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="[leakscan] %(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def handle_scan_command(args):
    """Handle the scan subcommand."""
    configure_logging(args.verbose)

    try:
        config = load_scanner_config(args.config, repo_root=args.root)
        if args.jobs:
            config["jobs"] = args.jobs
        scanner = Scanner.from_config(config)
        report = scanner.scan(args.root, verbose=args.verbose)
    except PathNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.format == "json":
        print(report_to_json(report))
    else:
        print(render_text(report))

    # Findings are already on stdout if writing the files fails.
    try:
        if args.output:
            export_json(report, args.output)
            if args.format == "text":
                print(f"\nJSON report written to {args.output}")
        if args.sarif_out:
            export_sarif(report, args.sarif_out, scanner.registry)
            if args.format == "text":
                print(f"SARIF report written to {args.sarif_out}")
    except ReportWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return exit_code_for(report)


def handle_rules_command(args):
    """List the rules a scan would use."""
    configure_logging()
    try:
        if args.config:
            config = load_scanner_config(args.config)
            registry = build_registry(config, config.get("source"))
        else:
            registry = build_registry()
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_ERROR
    print(render_rules(registry))
    return EXIT_CLEAN


def handle_init_command(args):
    """Write a starter config into the given directory."""
    root = Path(args.root)
    if not root.is_dir():
        print(f"Error: not a directory: {root}", file=sys.stderr)
        return EXIT_ERROR
    target = root / CONFIG_FILENAMES[0]
    if target.exists() and not args.force:
        print(f"Error: {target} already exists (use --force to overwrite)", file=sys.stderr)
        return EXIT_ERROR
    try:
        target.write_text(create_default_config_template(), encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot write {target}: {e.strerror or e}", file=sys.stderr)
        return EXIT_ERROR
    print(f"Wrote {target}")
    return EXIT_CLEAN


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
# === File: cli.py
# Version: 0.01.00
# Date: 2026-10-19 11:34:00 UTC
# Author: K-Cim
# Description: Command line entry point. Pipe-friendly (STDIN/STDOUT) + supports
# input path, --output and an optional timestamped log file.

import sys
import logging
import argparse
from datetime import datetime, timezone

from cssinliner import SCRIPT_DATE, SCRIPT_NAME, SCRIPT_VERSION
from cssinliner.errors import InlinerError
from cssinliner.inliner import InlineOptions, inline_html


# === Timestamped write into the log file ===
def write_log_entry(logfile, entry):
    if not logfile:
        return
    with open(logfile, 'a', encoding="utf-8") as log:
        log.write(f"{datetime.now(timezone.utc).isoformat()} ; {entry}\n")


def build_parser():
    parser = argparse.ArgumentParser(
        prog=SCRIPT_NAME,
        description="📦 Inline <style> and <link> CSS into style attributes (HTML e-mails)."
    )
    parser.add_argument("input", nargs="?", default="-", help="Input HTML file or '-' for STDIN (default)")
    parser.add_argument("-o", "--output", help="Output HTML file (default: STDOUT)", default=None)
    parser.add_argument("--fetch-external", action="store_true", help="Download <link rel=\"stylesheet\"> targets")
    parser.add_argument("--source-url", help="Base URL used to resolve relative stylesheet links")
    parser.add_argument("--proxy", help="HTTP proxy used to download external stylesheets")
    parser.add_argument("--timeout", type=float, default=10, help="Timeout in seconds for each download")
    parser.add_argument("--silent", action="store_true", help="No status output")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on STDERR")
    parser.add_argument("--log", help="Append a timestamped log to this file")
    parser.add_argument("-v", "--version", action="version", version=f"{SCRIPT_NAME} {SCRIPT_VERSION} – {SCRIPT_DATE}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    write_log_entry(args.log, f"# === {SCRIPT_NAME} – Version: {SCRIPT_VERSION} – Date: {SCRIPT_DATE} ===")
    write_log_entry(args.log, f"Input : {args.input}")

    if args.input == "-":
        html = sys.stdin.read()
    else:
        with open(args.input, 'r', encoding='utf-8') as f:
            html = f.read()

    options = InlineOptions(
        fetch_external=args.fetch_external,
        source_url=args.source_url,
        proxy=args.proxy,
        timeout=args.timeout,
    )
    if not args.fetch_external and (args.source_url or args.proxy) and not args.silent:
        print("[⚠️] --source-url/--proxy are ignored without --fetch-external", file=sys.stderr)

    try:
        result = inline_html(html, options)
    except InlinerError as e:
        write_log_entry(args.log, f"Failed : {e}")
        if not args.silent:
            print(f"[❌] {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(result)
        if not args.silent:
            print(f"[✅] Inlined HTML written to: {args.output}")
    else:
        sys.stdout.write(result)

    write_log_entry(args.log, f"Output : {args.output or 'STDOUT'} ; OK")


if __name__ == "__main__":
    main()

"""Resolve API references from the command line.

Each reference is looked up in the API manifests installed under the project's
``node_modules`` folder and printed with the kind and summary of the item it
names.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from docitem_loader.doc_item_loader import DocItemLoader
from docitem_loader.errors import DocItemLoaderError
from docitem_loader.load_config import load_config
from docitem_loader.parse_api_reference import parse_api_reference


def report_to_stderr(message: str) -> None:
    """Print a reported resolution error."""
    print(f"error: {message}", file=sys.stderr)


def run_resolution(args: argparse.Namespace) -> int:
    """Resolve every reference given on the command line."""
    config = load_config(args.config)
    try:
        loader = DocItemLoader(args.project_folder, config)
    except DocItemLoaderError as e:
        raise SystemExit(str(e)) from e

    unresolved = 0
    for text in args.references:
        reference = parse_api_reference(text, report_to_stderr)
        if reference is None:
            unresolved += 1
            continue
        try:
            item = loader.get_item(reference, report_to_stderr)
        except (DocItemLoaderError, json.JSONDecodeError) as e:
            raise SystemExit(str(e)) from e

        if item is None:
            unresolved += 1
            print(f"{text} -> (unresolved)")
            continue
        print(f"{text} -> {item.kind} {item.name}")
        if item.summary:
            print(f"  {item.summary}")

    return 1 if unresolved else 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the resolution."""
    ap = argparse.ArgumentParser(
        description="Resolve {@inheritdoc} references against installed API manifests.",
    )
    ap.add_argument(
        "project_folder",
        type=Path,
        help="Folder containing the project's package.json",
    )
    ap.add_argument(
        "references",
        nargs="+",
        help="References such as @scope/package:Export.member",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log cache and manifest activity",
    )
    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_resolution(args)


if __name__ == "__main__":
    raise SystemExit(main())

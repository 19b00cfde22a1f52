"""Command line entry point for resolving cross-package API references."""

from docitem_loader.resolve_references import main

if __name__ == "__main__":
    raise SystemExit(main())

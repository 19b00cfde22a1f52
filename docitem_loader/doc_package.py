"""Data model for a loaded API documentation package."""

from dataclasses import dataclass, field
from typing import Any

from docitem_loader.doc_item import DocItem


@dataclass(eq=False)
class DocPackage:
    """A validated manifest: exported items keyed by export name."""

    name: str
    exports: dict[str, DocItem]
    raw: dict[str, Any] = field(repr=False)

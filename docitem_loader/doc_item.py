"""Data models for documentation items found in an API manifest."""

from dataclasses import dataclass, field
from typing import Any

CLASS_LIKE_KINDS = frozenset({"class", "interface"})


@dataclass(eq=False)
class DocItem:
    """A documented API item (function, enum, property, method, etc.)."""

    kind: str
    name: str
    raw: dict[str, Any] = field(repr=False)  # validated manifest entry

    @property
    def summary(self) -> str:
        return markup_text(self.raw.get("summary"))


@dataclass(eq=False)
class ClassLikeItem(DocItem):
    """A class or interface; the only item kind that owns members."""

    members: dict[str, DocItem] = field(default_factory=dict)


def is_class_like_kind(kind: str) -> bool:
    """Check if the kind carries a ``members`` section."""
    return kind.lower() in CLASS_LIKE_KINDS


def markup_text(elements: object) -> str:
    """Flatten a manifest markup element list to plain text."""
    if not isinstance(elements, list):
        return ""
    parts = []
    for element in elements:
        if not isinstance(element, dict):
            continue
        if element.get("kind") in ("text", "code"):
            parts.append(str(element.get("text", "")))
        elif element.get("kind") in ("web-link", "api-link"):
            # Links wrap their visible text in nested elements
            parts.append(markup_text(element.get("elements")))
    return " ".join(p.strip() for p in parts if p.strip())

"""Data models for the outcome of resolving an API reference."""

from dataclasses import dataclass

from docitem_loader.doc_item import DocItem
from docitem_loader.doc_package import DocPackage

MISSING_REFERENCE = "missing_reference"
LOCAL_PACKAGE = "local_package"
PACKAGE_NOT_FOUND = "package_not_found"
EXPORT_NOT_FOUND = "export_not_found"
MEMBER_NOT_FOUND = "member_not_found"
NOT_CLASS_LIKE = "not_class_like"

# Reasons surfaced through the error callback; the rest stay silent there
REPORTED_REASONS = frozenset({MISSING_REFERENCE, PACKAGE_NOT_FOUND})


@dataclass(frozen=True)
class Found:
    """The reference resolved to a package or item."""

    value: DocPackage | DocItem


@dataclass(frozen=True)
class NotFound:
    """The reference could not be resolved."""

    reason: str
    message: str

    @property
    def reported(self) -> bool:
        return self.reason in REPORTED_REASONS


ResolutionResult = Found | NotFound

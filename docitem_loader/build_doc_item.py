"""Logic for turning a validated manifest document into typed items."""

from typing import Any

from docitem_loader.doc_item import ClassLikeItem, DocItem, is_class_like_kind
from docitem_loader.doc_package import DocPackage


def build_doc_item(name: str, raw: dict[str, Any]) -> DocItem:
    """Build a DocItem, recursing into members of classes and interfaces."""
    kind = raw["kind"]
    if not is_class_like_kind(kind):
        return DocItem(kind=kind, name=name, raw=raw)
    members = {
        member_name: build_doc_item(member_name, member)
        for member_name, member in (raw.get("members") or {}).items()
    }
    return ClassLikeItem(kind=kind, name=name, raw=raw, members=members)


def build_doc_package(name: str, document: dict[str, Any]) -> DocPackage:
    """Build a DocPackage from a manifest that passed schema validation."""
    exports = {
        export_name: build_doc_item(export_name, export)
        for export_name, export in document["exports"].items()
    }
    return DocPackage(name=name, exports=exports, raw=document)

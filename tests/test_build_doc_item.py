"""Tests for building typed items from manifest documents."""

from docitem_loader.build_doc_item import build_doc_item, build_doc_package
from docitem_loader.doc_item import ClassLikeItem, DocItem, markup_text


def test_build_class_with_members() -> None:
    """Verify that classes become ClassLikeItem with typed members."""
    item = build_doc_item(
        "Widget",
        {"kind": "class", "members": {"render": {"kind": "method"}}},
    )
    assert isinstance(item, ClassLikeItem)
    assert item.members["render"].kind == "method"
    assert item.members["render"].name == "render"


def test_build_plain_item_has_no_members() -> None:
    """Verify that non class-like kinds never expose a members mapping."""
    item = build_doc_item("Mode", {"kind": "enum", "members": {"x": {"kind": "x"}}})
    assert type(item) is DocItem
    assert not hasattr(item, "members")


def test_build_doc_package() -> None:
    """Verify that every export is converted."""
    document = {
        "kind": "package",
        "exports": {
            "IStyle": {"kind": "interface", "members": {}},
            "make": {"kind": "function"},
        },
    }
    package = build_doc_package("foo", document)
    assert package.name == "foo"
    assert set(package.exports) == {"IStyle", "make"}
    assert isinstance(package.exports["IStyle"], ClassLikeItem)
    assert package.raw is document


def test_markup_text() -> None:
    """Verify that summaries flatten to plain text, including link text."""
    elements = [
        {"kind": "text", "text": "Returns a "},
        {"kind": "api-link", "elements": [{"kind": "text", "text": "Widget"}]},
        {"kind": "paragraph"},
        {"kind": "code", "text": "render()"},
    ]
    assert markup_text(elements) == "Returns a Widget render()"
    assert markup_text(None) == ""

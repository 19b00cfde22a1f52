"""Shared fixtures for building fake projects with installed API manifests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

WIDGET_MANIFEST: dict[str, Any] = {
    "kind": "package",
    "summary": [{"kind": "text", "text": "Widgets for the demo."}],
    "exports": {
        "Widget": {
            "kind": "class",
            "summary": [{"kind": "text", "text": "A drawable widget."}],
            "members": {
                "render": {
                    "kind": "method",
                    "summary": [{"kind": "text", "text": "Draws the widget."}],
                },
                "size": {"kind": "property"},
            },
        },
        "IStyle": {
            "kind": "interface",
            "members": {"color": {"kind": "property"}},
        },
        "createWidget": {"kind": "function"},
        "Mode": {"kind": "enum"},
    },
}

ManifestWriter = Callable[..., Path]


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A project folder with a package.json marker."""
    (tmp_path / "package.json").write_text('{"name": "demo"}', encoding="utf-8")
    return tmp_path


@pytest.fixture
def write_manifest(project: Path) -> ManifestWriter:
    """Install an API manifest for a package under node_modules."""

    def _write(
        package_name: str,
        document: dict[str, Any] | str = WIDGET_MANIFEST,
        scope_name: str | None = None,
    ) -> Path:
        folder = project / "node_modules"
        if scope_name:
            folder = folder / scope_name
        path = folder / package_name / "dist" / f"{package_name}.api.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        text = document if isinstance(document, str) else json.dumps(document)
        path.write_text(text, encoding="utf-8")
        return path

    return _write

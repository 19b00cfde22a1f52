"""Tests for package identity functions and the package cache."""

from pathlib import Path

from docitem_loader.doc_package import DocPackage
from docitem_loader.doc_package_cache import DocPackageCache
from docitem_loader.package_cache_key import manifest_cache_key, package_cache_key


def test_package_cache_key() -> None:
    """Verify that the scope prefixes the package name when present."""
    assert package_cache_key("@acme", "core") == "@acme/core"
    assert package_cache_key(None, "core") == "core"
    assert package_cache_key("", "core") == "core"


def test_manifest_cache_key() -> None:
    """Verify that every extension suffix is stripped from the file name."""
    assert manifest_cache_key(Path("node_modules/foo/dist/foo.api.json")) == "foo"
    assert manifest_cache_key("x/sp-core-library.api.json") == "sp-core-library"


def test_cache_store_and_lookup() -> None:
    """Verify that stored packages are returned by identity."""
    cache = DocPackageCache()
    package = DocPackage(name="foo", exports={}, raw={})

    assert cache.lookup("foo") is None
    cache.store("foo", package)

    assert cache.lookup("foo") is package
    assert "foo" in cache
    assert len(cache) == 1

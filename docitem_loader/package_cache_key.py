"""Identity functions for packages stored in the documentation cache."""

from pathlib import Path


def package_cache_key(scope_name: str | None, package_name: str) -> str:
    """Return ``scope/package`` for scoped packages, else the bare package name."""
    # Scope is kept so that equally named packages from different scopes differ
    if scope_name:
        return f"{scope_name}/{package_name}"
    return package_name


def manifest_cache_key(manifest_path: Path | str) -> str:
    """Derive a cache key from a manifest file name (``foo.api.json`` -> ``foo``)."""
    return Path(manifest_path).name.split(".")[0]

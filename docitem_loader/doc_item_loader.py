"""Locate documentation items referenced from other packages.

The loader reads the ``*.api.json`` manifests that ApiJsonGenerator writes into
each package's ``dist`` folder. Manifests are found under the project's
``node_modules`` folder, validated against the bundled schema, and cached for
the lifetime of the loader. Resolved items can then be used to copy inherited
documentation or to enforce correct API usage.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from docitem_loader.api_definition_reference import ApiDefinitionReference
from docitem_loader.build_doc_item import build_doc_package
from docitem_loader.doc_item import ClassLikeItem, DocItem
from docitem_loader.doc_package import DocPackage
from docitem_loader.doc_package_cache import DocPackageCache
from docitem_loader.errors import ProjectFolderError
from docitem_loader.load_config import CACHE_KEY_MODES, load_config
from docitem_loader.load_json_file import load_json_file
from docitem_loader.package_cache_key import manifest_cache_key
from docitem_loader.resolution_result import (
    EXPORT_NOT_FOUND,
    LOCAL_PACKAGE,
    MEMBER_NOT_FOUND,
    MISSING_REFERENCE,
    NOT_CLASS_LIKE,
    PACKAGE_NOT_FOUND,
    Found,
    NotFound,
    ResolutionResult,
)
from docitem_loader.validate_manifest import BUNDLED_SCHEMA_PATH, validate_manifest

logger = logging.getLogger(__name__)

ReportError = Callable[[str], None]


class DocItemLoader:
    """Resolves API references to items in other packages' manifests.

    Construct one loader per project folder (the folder holding the project's
    ``package.json``), then call ``get_item`` for each reference.
    """

    def __init__(
        self,
        project_folder: Path | str,
        config: dict[str, Any] | None = None,
        cache: DocPackageCache | None = None,
    ):
        self.project_folder = Path(project_folder)
        self.config = config if config is not None else load_config()

        if not (self.project_folder / self.config["project_marker"]).exists():
            raise ProjectFolderError(project_folder)

        self.cache_key_mode = self.config["cache_key_mode"]
        if self.cache_key_mode not in CACHE_KEY_MODES:
            msg = (
                f"Unknown cache_key_mode {self.cache_key_mode!r}, "
                f"expected one of {', '.join(CACHE_KEY_MODES)}"
            )
            raise ValueError(msg)

        self.cache = cache if cache is not None else DocPackageCache()
        self._schema: dict[str, Any] | None = None

    @property
    def schema(self) -> dict[str, Any]:
        """The manifest JSON schema, read on first use."""
        if self._schema is None:
            schema_path = self.config.get("schema_path") or BUNDLED_SCHEMA_PATH
            self._schema = load_json_file(Path(schema_path))
        return self._schema

    def get_item(
        self, reference: ApiDefinitionReference | None, report_error: ReportError
    ) -> DocItem | None:
        """Return the item the reference points at, or None.

        Missing references and missing packages are passed to ``report_error``;
        unknown exports and members return None without a report.
        """
        result = self.resolve(reference)
        if isinstance(result, Found):
            return result.value  # type: ignore[return-value]
        if result.reported:
            report_error(result.message)
        return None

    def get_package(
        self, reference: ApiDefinitionReference, report_error: ReportError
    ) -> DocPackage | None:
        """Return the referenced package, loading its manifest if needed."""
        result = self.resolve_package(reference)
        if isinstance(result, Found):
            return result.value  # type: ignore[return-value]
        if result.reported:
            report_error(result.message)
        return None

    def resolve(self, reference: ApiDefinitionReference | None) -> ResolutionResult:
        """Resolve a reference to its export or member item."""
        if reference is None:
            return NotFound(
                MISSING_REFERENCE, "Expected reference within {@inheritdoc} tag"
            )

        package_result = self.resolve_package(reference)
        if isinstance(package_result, NotFound):
            return package_result
        package: DocPackage = package_result.value  # type: ignore[assignment]

        item = package.exports.get(reference.export_name)
        if item is None:
            return NotFound(
                EXPORT_NOT_FOUND,
                f'"{reference.export_name}" is not exported by package '
                f'"{reference.cache_key}"',
            )

        if reference.member_name:
            if not isinstance(item, ClassLikeItem):
                return NotFound(
                    NOT_CLASS_LIKE,
                    f'"{reference.export_name}" is a {item.kind} and has no '
                    f'member "{reference.member_name}"',
                )
            member = item.members.get(reference.member_name)
            if member is None:
                return NotFound(
                    MEMBER_NOT_FOUND,
                    f'"{reference.member_name}" is not a member of '
                    f'"{reference.export_name}"',
                )
            item = member

        return Found(item)

    def resolve_package(self, reference: ApiDefinitionReference) -> ResolutionResult:
        """Resolve a reference to its package, consulting the cache first."""
        key = reference.cache_key
        cached = self.cache.lookup(key)
        if cached is not None:
            return Found(cached)

        if not reference.package_name:
            return NotFound(LOCAL_PACKAGE, "Local export resolution is not supported")

        manifest_path = self.manifest_path(reference)
        logger.debug("Looking for %s manifest at %s", key, manifest_path)
        if not manifest_path.exists():
            logger.warning("No API manifest for %s at %s", key, manifest_path)
            return NotFound(
                PACKAGE_NOT_FOUND,
                f'@inheritdoc referenced package ("{reference.package_name}") '
                "not found in node modules.",
            )

        store_key = key if self.cache_key_mode == "reference" else None
        return Found(self.load_package_into_cache(manifest_path, store_key))

    def manifest_path(self, reference: ApiDefinitionReference) -> Path:
        """Compute ``<project>/node_modules/<scope>/<package>/dist/<package>.api.json``."""
        folder = self.project_folder / self.config["modules_dir"]
        if reference.scope_name:
            folder = folder / reference.scope_name
        relative = self.config["manifest_pattern"].format(
            package=reference.package_name
        )
        return folder / reference.package_name / relative

    def load_package_into_cache(
        self, manifest_path: Path | str, cache_key: str | None = None
    ) -> DocPackage:
        """Load and validate a manifest, then cache and return its package.

        Without ``cache_key`` the package is stored under the manifest's file
        name. Malformed JSON and schema violations are raised, not reported.
        """
        manifest_path = Path(manifest_path)
        document = load_json_file(manifest_path)
        validate_manifest(
            document, self.schema, self.config["tool_name"], path=manifest_path
        )

        key = cache_key or manifest_cache_key(manifest_path)
        package = build_doc_package(key, document)
        self.cache.store(key, package)
        logger.info(
            "Loaded %d exports for %s from %s", len(package.exports), key, manifest_path
        )
        return package

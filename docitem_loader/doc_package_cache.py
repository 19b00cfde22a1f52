"""In-memory cache of loaded documentation packages."""

import logging

from docitem_loader.doc_package import DocPackage

logger = logging.getLogger(__name__)


class DocPackageCache:
    """Holds every package loaded by one loader; entries are never evicted."""

    def __init__(self) -> None:
        self.packages: dict[str, DocPackage] = {}

    def __contains__(self, key: str) -> bool:
        return key in self.packages

    def __len__(self) -> int:
        return len(self.packages)

    def lookup(self, key: str) -> DocPackage | None:
        package = self.packages.get(key)
        if package is not None:
            logger.debug("Cache hit for package %r", key)
        return package

    def store(self, key: str, package: DocPackage) -> None:
        if key in self.packages:
            logger.debug("Replacing cached package %r", key)
        self.packages[key] = package

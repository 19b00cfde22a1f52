"""Data model for a parsed cross-package API reference."""

from dataclasses import dataclass

from docitem_loader.package_cache_key import package_cache_key


@dataclass(frozen=True)
class ApiDefinitionReference:
    """Points at an exported API item, optionally one of its members.

    Example: ``@microsoft/sp-core-library:Guid.equals`` has scope ``@microsoft``,
    package ``sp-core-library``, export ``Guid`` and member ``equals``.
    """

    package_name: str
    export_name: str
    scope_name: str | None = None
    member_name: str | None = None

    @property
    def cache_key(self) -> str:
        return package_cache_key(self.scope_name, self.package_name)

    def __str__(self) -> str:
        package = self.cache_key
        target = self.export_name
        if self.member_name:
            target = f"{target}.{self.member_name}"
        return f"{package}:{target}" if package else target

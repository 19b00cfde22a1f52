"""Parse reference strings such as ``@scope/package:Export.member``."""

import re
from collections.abc import Callable

from docitem_loader.api_definition_reference import ApiDefinitionReference

PACKAGE_RE = re.compile(r"^(?:(@[A-Za-z0-9._~-]+)/)?([A-Za-z0-9._~-]+)$")
EXPORT_PATH_RE = re.compile(r"^([A-Za-z0-9_$-]+)(?:\.([A-Za-z0-9_$-]+))?$")


def parse_api_reference(
    text: str, report_error: Callable[[str], None]
) -> ApiDefinitionReference | None:
    """Parse a reference string, reporting and returning None when malformed.

    A reference without ``package:`` refers to the local package and gets an
    empty package name.
    """
    stripped = text.strip()
    package_part, sep, export_part = stripped.rpartition(":")

    scope_name = None
    package_name = ""
    if sep:
        package_match = PACKAGE_RE.match(package_part)
        if not package_match:
            report_error(f'Invalid API definition reference: "{text}"')
            return None
        scope_name, package_name = package_match.groups()

    export_match = EXPORT_PATH_RE.match(export_part)
    if not export_match:
        report_error(f'Invalid API definition reference: "{text}"')
        return None
    export_name, member_name = export_match.groups()

    return ApiDefinitionReference(
        package_name=package_name,
        export_name=export_name,
        scope_name=scope_name,
        member_name=member_name,
    )

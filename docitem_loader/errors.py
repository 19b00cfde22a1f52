"""Exceptions raised for unrecoverable loader failures."""

from pathlib import Path


class DocItemLoaderError(Exception):
    """Base class for fatal documentation loader errors."""


class ProjectFolderError(DocItemLoaderError):
    """Raised when the project folder has no project marker file."""

    def __init__(self, project_folder: Path | str):
        self.project_folder = Path(project_folder)
        super().__init__(
            f"An NPM project was not found in the specified folder: {project_folder}"
        )


class ManifestValidationError(DocItemLoaderError):
    """Raised when a manifest does not conform to the bundled JSON schema."""

    def __init__(self, message: str, path: Path | None = None, detail: str = ""):
        self.path = path
        self.detail = detail
        super().__init__(message)

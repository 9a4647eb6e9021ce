# ABOUTME: Exception hierarchy for EPUB container introspection.
# ABOUTME: Structural failures collapse to None at open time; ResourceNotFoundError reaches callers.


class EpubError(Exception):
    """Base class for every failure raised while reading an EPUB."""


class NotAnEpubError(EpubError):
    """Raised when a path is missing or does not carry the .epub extension."""


class CorruptContainerError(EpubError):
    """Raised when the zip or its META-INF/container.xml cannot be used."""


class MissingPackageDocumentError(EpubError):
    """Raised when the package document named by the container is absent."""


class MalformedPackageDocumentError(EpubError):
    """Raised when the package document exists but is not well-formed XML."""


class ResourceNotFoundError(EpubError):
    """Raised when a requested archive entry does not exist."""

    def __init__(self, zip_path: str) -> None:
        super().__init__(f"Resource not found in EPUB: {zip_path}")
        self.zip_path = zip_path

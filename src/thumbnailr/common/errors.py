from typing import override


class ThumbnailrError(Exception):
    """
    Base class for every error raised by thumbnailr itself.
    Errors coming from Pillow or the filesystem are not wrapped.
    """

    def __init__(self, message: str = "An unknown thumbnail error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class InvalidPolicyError(ThumbnailrError, ValueError):
    """Raised when a fit policy is not one of the supported values."""


class UnsupportedFormatError(ThumbnailrError, ValueError):
    """Raised when a source or target path does not carry a PNG/JPEG suffix."""


class NotBuiltError(ThumbnailrError, RuntimeError):
    """Raised when an export is requested before a successful build."""

    def __init__(self, message: str = "No thumbnail has been built yet; call build() first."):
        super().__init__(message)

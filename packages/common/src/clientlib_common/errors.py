"""Custom error types for the clientlib generator.

All errors follow the "fail fast" principle with explicit messages.
Nothing is retried: the first failure aborts the current library and
the rest of the batch.
"""

from typing import Optional, Sequence


class ClientlibError(Exception):
    """Base exception for all clientlib generator errors."""

    pass


class ConfigurationError(ClientlibError):
    """Invalid library item, generator options or config file."""

    pass


class AssetSpecError(ClientlibError):
    """Asset specification that cannot be turned into a copy plan.

    Raised for specs matching none of the accepted shapes, and for asset
    records without a ``files`` list once materialization reaches them.
    """

    pass


class MaterializationError(ClientlibError):
    """Filesystem failure while deleting, writing or copying a clientlib."""

    def __init__(self, message: str, library: Optional[str] = None):
        super().__init__(message)
        self.library = library


class BatchError(ClientlibError):
    """A library in a batch failed; later libraries were not processed.

    Output already written for ``completed`` libraries is left on disk.
    """

    def __init__(self, message: str, library: str, completed: Sequence[str] = ()):
        super().__init__(message)
        self.library = library
        self.completed = list(completed)

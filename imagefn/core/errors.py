"""Errors raised while producing the image list.

Every error here is terminal for an invocation: nothing is retried and no
partial envelope is written.
"""


class ImageFunctionError(Exception):
    """Base class for invocation failures."""


class ConfigurationError(ImageFunctionError):
    """A required environment variable is missing."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"can not read environment variable {variable}")


class DatabaseConnectionError(ImageFunctionError):
    """The database connection could not be opened."""


class QueryError(ImageFunctionError):
    """The image query failed to execute or its rows could not be fetched."""


class ScanError(ImageFunctionError):
    """A row's column values could not be converted into an image record."""

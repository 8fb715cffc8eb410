"""
license-preamble — Custom Exceptions.

Every error the CLI turns into a non-zero exit derives from PreambleError.
"""


class PreambleError(Exception):
    """Base exception for all license-preamble errors."""


class CatalogError(PreambleError):
    """Raised when a bundled license document cannot be parsed.

    The catalog ships with the package, so this means a broken install
    rather than bad user input.
    """


class InvalidLicense(PreambleError):
    """Raised when no catalog entry matches the requested license name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid license '{name}', list available licenses with `list`"
        )


class MissingPreamble(PreambleError):
    """Raised when `add` runs before `init` created the PREAMBLE file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} not found. Run init first")


class EmptyPreamble(PreambleError):
    """Raised when the PREAMBLE file holds nothing but whitespace."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} is empty, nothing to add")


class UnreadablePreamble(PreambleError):
    """Raised when PREAMBLE exists but cannot be read as UTF-8 text."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")

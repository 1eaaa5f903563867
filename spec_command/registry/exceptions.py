"""Exceptions for the reference registry."""


class RegistryError(Exception):
    """Base class for reference registry errors."""

    pass


class MalformedDatabase(RegistryError):
    """Raised when the API reference database cannot be read or deserialized.

    The load attempt is abandoned and any previously installed partition
    stays authoritative.

    Attributes:
        source: Path or description of the document that failed.
    """

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} (source: {self.source})"
        return self.message


class MalformedConfigEntry(RegistryError):
    """A single mnemonic or snippet template line does not match its grammar.

    Never propagated out of a rebuild; the entry is skipped.

    Attributes:
        text: The offending configuration line.
        category: What the line was meant to be, e.g. 'mnemonic' or 'snippet'.
    """

    def __init__(self, text: str, category: str) -> None:
        self.text = text
        self.category = category
        super().__init__(f"Unexpected {category} format: {text!r}")


class ReferenceTimeout(RegistryError):
    """Raised when a bounded wait for a source partition is exhausted.

    Attributes:
        uri: The source identity that never became available.
        attempts: Number of polls made before giving up.
    """

    def __init__(self, uri: str, attempts: int) -> None:
        self.uri = uri
        self.attempts = attempts
        super().__init__(f"Source '{uri}' not available after {attempts} attempts")

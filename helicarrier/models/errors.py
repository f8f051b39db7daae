"""
Catalog error taxonomy.

Every error here is raised while loading the catalog. Once a Catalog exists,
queries against it never raise: a filter that does not match is simply a
non-match.

- DecodeError: a token did not match its grammar (scalars, keywords,
  card side tags)
- DocumentError: a source document could not be parsed or validated
- IntegrityError: the documents parsed but do not cross-reference
"""

from typing import Any


class CatalogError(Exception):
    """Base class for all catalog load failures."""


class DecodeError(CatalogError, ValueError):
    """
    Raised when a token matches none of the grammars of its type.

    Subclasses ValueError so that pydantic reports it as a regular field
    error when it is raised from inside a validator.

    Attributes:
        token: The offending input, as received
        expected: Human readable description of the accepted grammar
    """

    def __init__(self, token: Any, expected: str):
        self.token = token
        self.expected = expected
        super().__init__(f"{token!r} is not valid: expected {expected}")


class DocumentError(CatalogError):
    """
    Raised when a source document is rejected wholesale.

    Attributes:
        source: Name of the document (usually its path)
        errors: pydantic error dicts, empty for syntax errors
    """

    def __init__(self, source: str, message: str, errors: list[dict[str, Any]] | None = None):
        self.source = source
        self.errors = errors or []
        super().__init__(f"{source}: {message}")

    @property
    def decode_errors(self) -> list[DecodeError]:
        """DecodeErrors raised by validators while the document was validated."""
        found: list[DecodeError] = []
        for error in self.errors:
            cause = error.get("ctx", {}).get("error")
            if isinstance(cause, DecodeError):
                found.append(cause)
        return found


class IntegrityError(CatalogError):
    """Raised when keys collide or a card references a missing product or set."""

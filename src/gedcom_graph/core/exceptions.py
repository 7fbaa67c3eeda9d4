from typing import Optional


class GedcomGraphError(Exception):
    """Base exception for gedcom_graph failures."""


class MalformedLine(GedcomGraphError, ValueError):
    """Raised when a line cannot be split into depth, tag and data.

    Fatal to the whole parse: no partial tree is returned.
    """

    def __init__(self, message: str, lineno: int = 0, line: Optional[str] = None):
        super().__init__(message)
        self.lineno = lineno
        self.line = line

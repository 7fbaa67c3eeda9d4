from .exceptions import GedcomGraphError, MalformedLine

__all__ = ["GedcomGraphError", "MalformedLine"]

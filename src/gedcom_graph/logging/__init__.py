"""
Logging package for ``gedcom_graph``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers and get a
module-specific log file.
"""

from .logger import get_logger

__all__ = [
    "get_logger",
]

"""src/urikit/uri/__init__.py

URI decomposition and recomposition for Urikit.

This module provides the component store, the single-pass parser and the
canonical string builder.
"""

from .builder import BuildOptions, build
from .components import ComponentKind, ComponentStore, create
from .formatting import format_elements, print_elements, print_uri
from .parser import UriParser, parse
from .scanner import Scanner

__all__ = [
    "ComponentKind",
    "ComponentStore",
    "create",
    "Scanner",
    "UriParser",
    "parse",
    "BuildOptions",
    "build",
    "print_uri",
    "format_elements",
    "print_elements",
]

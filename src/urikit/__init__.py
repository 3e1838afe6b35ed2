"""src/urikit/__init__.py

Urikit - Minimal URI decomposition and recomposition for Python.

Urikit splits a URI string into its components (scheme, userinfo, host, port,
path, query, fragment) and joins them back into a canonical string. It is
built for constructing URIs piecewise, e.g. producing sequential URIs by
varying one component, without re-parsing after every change.

Key Features:
    - Zero external dependencies
    - Permissive, non-validating single-pass parser
    - Pull-based rebuild: mutations never re-serialize on their own
    - Full type hints (PEP 561)
    - Memory optimized with __slots__

Example:
    Parsing and rebuilding::

        from urikit import ComponentKind, parse

        uri = parse('http://user@example.com:8080/a/b?x=1#top')
        print(uri.get(ComponentKind.HOST))    # example.com

        uri.set(ComponentKind.PATH, '/a/c')
        print(uri.canonical_string())         # http://user@example.com:8080/a/c?x=1#top

    Building from scratch::

        from urikit import create

        uri = create()
        uri.set('scheme', 'https')
        uri.set('host', 'example.com')
        for page in range(1, 4):
            uri.set('path', f'/page/{page}')
            print(uri.canonical_string())
"""

from urikit.exceptions import (
    InputTooLongError,
    ParseError,
    UrikitError,
    URISyntaxError,
)
from urikit.uri import (
    BuildOptions,
    ComponentKind,
    ComponentStore,
    UriParser,
    build,
    create,
    format_elements,
    parse,
    print_elements,
    print_uri,
)
from urikit.version import __version__

__all__ = [
    "ComponentKind",
    "ComponentStore",
    "create",
    "UriParser",
    "parse",
    "BuildOptions",
    "build",
    "print_uri",
    "format_elements",
    "print_elements",
    "UrikitError",
    "ParseError",
    "URISyntaxError",
    "InputTooLongError",
    "__version__",
]

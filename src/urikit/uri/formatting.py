"""src/urikit/uri/formatting.py

Output helpers for component stores.
"""

import sys
from typing import IO, Optional

from urikit.uri.components import ComponentStore

__all__ = ["print_uri", "format_elements", "print_elements"]


def print_uri(store: ComponentStore, sink: Optional[IO[str]] = None) -> None:
    """
    Write the store's last built string to ``sink`` (stdout by default).

    Does not rebuild, so the output may be stale after ``set``/``remove``.
    Writes nothing if the store was never built.
    """
    if store.cached_build is None:
        return
    if sink is None:
        sink = sys.stdout
    sink.write(store.cached_build)


def format_elements(store: ComponentStore) -> str:
    """
    Render every slot on its own line for debugging.

    Each line is ``<index> <name>``, followed by `` - <value>`` when the slot
    is present. Index 0 is the cached build.
    """
    rows = [("build", store.cached_build)]
    rows.extend(store.elements().items())

    lines = []
    for index, (name, value) in enumerate(rows):
        line = f"{index} {name}"
        if value is not None:
            line += f" - {value}"
        lines.append(line)
    return "\n".join(lines) + "\n"


def print_elements(store: ComponentStore, sink: Optional[IO[str]] = None) -> None:
    """Write ``format_elements(store)`` to ``sink`` (stdout by default)."""
    if sink is None:
        sink = sys.stdout
    sink.write(format_elements(store))

"""src/urikit/uri/builder.py

Canonical string builder for Urikit.

Concatenates the present components of a ``ComponentStore`` in fixed order::

    scheme ":" [ "//" [ userinfo "@" ] host [ ":" port ] ] path [ "?" query ] [ "#" fragment ]

Known limitation: when ``path`` is absent but ``query`` or ``fragment`` is
present, nothing separates the authority from ``?``/``#``. The default
options reproduce this; ``BuildOptions.normalized()`` inserts a ``/``.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from urikit.uri.components import ComponentStore

__all__ = ["BuildOptions", "build"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildOptions:
    """
    Builder configuration.

    Attributes:
        insert_missing_path_slash: Emit ``/`` after the authority when the
            path is absent and a query or fragment follows.
    """

    insert_missing_path_slash: bool = False

    @classmethod
    def compatible(cls) -> "BuildOptions":
        """Options that keep the historical output, separator gap included."""
        return cls()

    @classmethod
    def normalized(cls) -> "BuildOptions":
        """Options that close the separator gap after the authority."""
        return cls(insert_missing_path_slash=True)


_DEFAULT_OPTIONS = BuildOptions.compatible()


def build(store: ComponentStore, options: Optional[BuildOptions] = None) -> str:
    """
    Build the canonical string for ``store`` and cache it on the store.

    A store without ``scheme`` is built without the ``scheme:`` prefix.

    Args:
        store: Component store to serialize.
        options: Build options; defaults to ``BuildOptions.compatible()``.

    Returns:
        The canonical string, also available as ``store.cached_build``.
    """
    if options is None:
        options = _DEFAULT_OPTIONS

    parts: List[str] = []

    if store.scheme is not None:
        parts.append(store.scheme)
        parts.append(":")

    if store.host is not None:
        parts.append("//")
        if store.userinfo is not None:
            parts.append(store.userinfo)
            parts.append("@")
        parts.append(store.host)
        if store.port is not None:
            parts.append(":")
            parts.append(store.port)

    if store.path is not None:
        parts.append(store.path)
    elif (
        options.insert_missing_path_slash
        and store.host is not None
        and (store.query is not None or store.fragment is not None)
    ):
        parts.append("/")

    if store.query is not None:
        parts.append("?")
        parts.append(store.query)

    if store.fragment is not None:
        parts.append("#")
        parts.append(store.fragment)

    result = "".join(parts)
    logger.debug("Built %r", result)
    # pylint: disable=protected-access
    store._store_build(result)
    return result

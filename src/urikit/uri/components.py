"""src/urikit/uri/components.py

Component storage for a single decomposed URI.

This module provides the ``ComponentStore`` record holding the seven semantic
URI components plus the last built canonical string, and the
``ComponentKind`` enumeration used to address the semantic components.
"""

from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Union

if TYPE_CHECKING:
    from urikit.uri.builder import BuildOptions

__all__ = ["ComponentKind", "ComponentStore", "create"]


class ComponentKind(Enum):
    """Closed set of addressable URI components, in canonical order."""

    SCHEME = "scheme"
    USERINFO = "userinfo"
    HOST = "host"
    PORT = "port"
    PATH = "path"
    QUERY = "query"
    FRAGMENT = "fragment"


KindLike = Union[ComponentKind, str]


def _clone_text(value: Optional[str]) -> Optional[str]:
    """Return an owned plain ``str`` copy of ``value``, or ``None``."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(
            f"Component value must be str or None, not {type(value).__name__}"
        )
    return str(value)


def _resolve_kind(kind: KindLike) -> ComponentKind:
    if isinstance(kind, ComponentKind):
        return kind
    try:
        return ComponentKind(kind)
    except ValueError as exc:
        raise KeyError(kind) from exc


class ComponentStore:
    """
    Decomposed state of one URI.

    Every semantic slot is independently present (a ``str``, possibly empty)
    or absent (``None``). The cached build is separate from the semantic
    slots: it is refreshed only by ``canonical_string()`` or by a parse, never
    by ``set()`` or ``remove()``.

    Attributes:
        cached_build: Last built canonical string, or ``None`` if never built.
    """

    __slots__ = (
        "scheme",
        "userinfo",
        "host",
        "port",
        "path",
        "query",
        "fragment",
        "_cached_build",
    )

    def __init__(self) -> None:
        self.scheme: Optional[str] = None
        self.userinfo: Optional[str] = None
        self.host: Optional[str] = None
        self.port: Optional[str] = None
        self.path: Optional[str] = None
        self.query: Optional[str] = None
        self.fragment: Optional[str] = None
        self._cached_build: Optional[str] = None

    def __repr__(self) -> str:
        present = ", ".join(
            f"{name}={value!r}"
            for name, value in self.elements().items()
            if value is not None
        )
        return f"ComponentStore({present})"

    @property
    def cached_build(self) -> Optional[str]:
        """Last built canonical string (not refreshed by set/remove)."""
        return self._cached_build

    def set(self, kind: KindLike, value: Optional[str]) -> None:
        """
        Store a copy of ``value`` in the given slot.

        Args:
            kind: Component to replace.
            value: New text, or ``None`` to clear the slot.
        """
        setattr(self, _resolve_kind(kind).value, _clone_text(value))

    def get(self, kind: KindLike) -> Optional[str]:
        """Return a copy of the slot's current text, or ``None`` if absent."""
        return _clone_text(getattr(self, _resolve_kind(kind).value))

    def remove(self, kind: KindLike) -> Optional[str]:
        """
        Clear a slot and hand its former value to the caller.

        Returns:
            The value the store held, or ``None`` if the slot was absent.
        """
        name = _resolve_kind(kind).value
        value = getattr(self, name)
        setattr(self, name, None)
        return value

    def canonical_string(self, options: Optional["BuildOptions"] = None) -> str:
        """
        Rebuild the canonical string from the current slots and return it.

        This is the only read that always reflects the current semantic state.

        Args:
            options: Build options; defaults to the compatible behavior.
        """
        # pylint: disable=import-outside-toplevel
        from urikit.uri.builder import build

        return build(self, options)

    def elements(self) -> Dict[str, Optional[str]]:
        """Return every semantic slot keyed by component name, in canonical order."""
        return {kind.value: getattr(self, kind.value) for kind in ComponentKind}

    def copy(self) -> "ComponentStore":
        """Return an independent store with the same slots and cached build."""
        clone = ComponentStore()
        for kind in ComponentKind:
            setattr(clone, kind.value, getattr(self, kind.value))
        clone._cached_build = self._cached_build
        return clone

    def _store_build(self, text: str) -> None:
        self._cached_build = text


def create() -> ComponentStore:
    """Create an empty store with every slot absent."""
    return ComponentStore()

"""src/urikit/uri/parser.py

Permissive single-pass URI parser.
"""

import logging
from typing import Optional

from urikit.exceptions import InputTooLongError, URISyntaxError
from urikit.uri.builder import BuildOptions, build
from urikit.uri.components import ComponentKind, ComponentStore
from urikit.uri.scanner import Scanner

__all__ = ["UriParser", "parse"]

logger = logging.getLogger(__name__)


class UriParser:
    """
    Non-validating URI parser.

    Scans the input once, left to right:

    - Scheme: everything before the first ``:`` (required).
    - Authority: only when ``//`` follows the scheme. Optional ``userinfo@``,
      then host up to ``:``, ``/`` or end, then an optional ``:port`` up to
      ``/`` or end.
    - Path: up to ``?``, ``#`` or end (possibly empty).
    - Query: after ``?`` up to ``#`` or end.
    - Fragment: after ``#`` to end.

    Delimiters are not stored with the values. Input ending after the host or
    port leaves the remaining components absent. The only syntax failure is a
    missing scheme delimiter.
    """

    def __init__(
        self,
        max_length: Optional[int] = None,
        build_options: Optional[BuildOptions] = None,
    ):
        self.max_length = max_length
        self.build_options = build_options

    def parse(self, uri: str) -> ComponentStore:
        """
        Decompose ``uri`` into a new component store.

        The store's canonical string is built before it is returned.

        Raises:
            URISyntaxError: If ``uri`` contains no ``:``.
            InputTooLongError: If ``uri`` is longer than ``max_length``.
        """
        if self.max_length is not None and len(uri) > self.max_length:
            raise InputTooLongError(
                f"URI length {len(uri)} exceeds maximum of {self.max_length}"
            )

        scanner = Scanner(uri)
        store = ComponentStore()

        self._parse_scheme(scanner, store)
        self._parse_hierarchy(scanner, store)

        build(store, self.build_options)
        logger.debug("Parsed %r into %r", uri, store)
        return store

    def _parse_hierarchy(self, scanner: Scanner, store: ComponentStore) -> None:
        """Parse everything after ``scheme:``, stopping at end of input."""
        if scanner.consume("//") and not self._parse_authority(scanner, store):
            return

        if not self._parse_path(scanner, store):
            return

        self._parse_query(scanner, store)
        self._parse_fragment(scanner, store)

    def _parse_scheme(self, scanner: Scanner, store: ComponentStore) -> None:
        scheme = scanner.scan_until(":")
        if scanner.at_end:
            logger.debug("No scheme delimiter in %r", scanner.text)
            raise URISyntaxError(
                f"Missing scheme delimiter ':' in {scanner.text!r}",
                uri=scanner.text,
            )
        scanner.consume(":")
        store.set(ComponentKind.SCHEME, scheme)

    def _parse_authority(self, scanner: Scanner, store: ComponentStore) -> bool:
        """
        Parse ``[userinfo@]host[:port]``; the leading ``//`` is already consumed.

        Returns:
            False if the input ended inside the authority.
        """
        text = scanner.scan_until("@:/")

        if scanner.consume("@"):
            store.set(ComponentKind.USERINFO, text)
            text = scanner.scan_until(":/")

        store.set(ComponentKind.HOST, text)

        if scanner.consume(":"):
            self._parse_port(scanner, store)

        return not scanner.at_end

    def _parse_port(self, scanner: Scanner, store: ComponentStore) -> None:
        store.set(ComponentKind.PORT, scanner.scan_until("/"))

    def _parse_path(self, scanner: Scanner, store: ComponentStore) -> bool:
        """
        Parse the path up to ``?``, ``#`` or end.

        Returns:
            False if the input ended with the path.
        """
        store.set(ComponentKind.PATH, scanner.scan_until("?#"))
        return not scanner.at_end

    def _parse_query(self, scanner: Scanner, store: ComponentStore) -> None:
        if scanner.consume("?"):
            store.set(ComponentKind.QUERY, scanner.scan_until("#"))

    def _parse_fragment(self, scanner: Scanner, store: ComponentStore) -> None:
        if scanner.consume("#"):
            store.set(ComponentKind.FRAGMENT, scanner.scan_until(""))


def parse(
    uri: str,
    *,
    max_length: Optional[int] = None,
    options: Optional[BuildOptions] = None,
) -> ComponentStore:
    """
    Parse ``uri`` with a one-off ``UriParser``.

    Args:
        uri: Raw URI string.
        max_length: Optional upper bound on input length.
        options: Build options used for the initial canonical string.

    Returns:
        A populated store whose ``cached_build`` is already set.

    Raises:
        URISyntaxError: If ``uri`` contains no ``:``.
        InputTooLongError: If ``uri`` is longer than ``max_length``.
    """
    return UriParser(max_length=max_length, build_options=options).parse(uri)

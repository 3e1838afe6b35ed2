"""src/urikit/uri/scanner.py

Left-to-right cursor over a URI string.
"""

__all__ = ["Scanner"]


class Scanner:
    """
    Forward-only cursor used by the URI parser.

    The cursor never moves backwards. ``scan_until`` stops *on* the delimiter
    it finds, so the caller decides whether to consume it.

    Attributes:
        text: Input being scanned.
        pos: Index of the next unread character.
    """

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    @property
    def at_end(self) -> bool:
        """True when every character has been consumed."""
        return self.pos >= len(self.text)

    @property
    def current(self) -> str:
        """Next unread character, or an empty string at end of input."""
        return self.text[self.pos : self.pos + 1]

    @property
    def remainder(self) -> str:
        """Unread part of the input."""
        return self.text[self.pos :]

    def startswith(self, literal: str) -> bool:
        """Check whether the unread input begins with ``literal``."""
        return self.text.startswith(literal, self.pos)

    def consume(self, literal: str) -> bool:
        """
        Advance past ``literal`` if the unread input begins with it.

        Returns:
            True if the literal was consumed.
        """
        if not self.startswith(literal):
            return False
        self.pos += len(literal)
        return True

    def scan_until(self, delimiters: str) -> str:
        """
        Read up to (not including) the first character in ``delimiters``.

        Args:
            delimiters: Set of stop characters. An empty set reads to the end.

        Returns:
            The text read, possibly empty. The cursor rests on the delimiter,
            or at end of input if none was found.
        """
        start = self.pos
        end = len(self.text)
        while self.pos < end and self.text[self.pos] not in delimiters:
            self.pos += 1
        return self.text[start : self.pos]

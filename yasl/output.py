"""Output sinks for printed program output and error messages."""

import sys


class Output:
    """Writes text to a file, collects it into a string, or discards it."""

    def __init__(self, file=None):
        self.file = file
        self.string = ""
        self._mode = "file"

    def write(self, text: str) -> None:
        """Send ``text`` to the current sink."""
        if self._mode == "string":
            self.string += text
        elif self._mode == "file":
            (self.file if self.file is not None else sys.stdout).write(text)

    def to_string(self) -> None:
        """Collect further writes into :attr:`string`."""
        self._mode = "string"

    def silence(self) -> None:
        """Discard further writes."""
        self._mode = "none"


def strip_char(src, rem):
    """Return ``src`` with every occurrence of ``rem`` removed."""
    if isinstance(src, (bytes, bytearray)) and isinstance(rem, int):
        rem = bytes([rem])
    return src.replace(rem, src[:0])
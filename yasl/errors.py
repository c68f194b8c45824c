"""Exceptions raised for errors reported by the interpreter."""


class YaslError(Exception):
    """A runtime error raised inside the interpreter."""

    def __init__(self, message: str = "Error"):
        super().__init__(message)
        self.message = message


class YaslTypeError(YaslError):
    """A value had the wrong type for an operation."""


class YaslValueError(YaslError):
    """A value had the right type but an unacceptable value."""
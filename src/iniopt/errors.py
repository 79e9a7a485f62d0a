"""
Error taxonomy for iniopt.

Two conditions are signaled outward by the option container:
    - NotFound: an index/position is out of range, or a value is read
      from an option that holds no values
    - BadCast: the requested kind does not match the stored kind

Both are meant to reach the caller. Nothing in this package catches them.
"""


class OptionError(Exception):
    """Base class for all iniopt errors."""
    pass


class NotFound(OptionError, IndexError):
    """
    Raised when a position is out of range or the value sequence is empty.

    Properties:
        position: The offending index/position
    """

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Element not found at position {position}")


class BadCast(OptionError, TypeError):
    """Raised when a requested kind disagrees with the stored kind."""

    def __init__(self, message: str = "Cannot cast to requested type"):
        self.message = message
        super().__init__(message)


class ParseError(BadCast):
    """Raised when text cannot be read as a value of the given kind."""

    def __init__(self, text: str, kind):
        self.text = text
        self.kind = kind
        kind_name = getattr(kind, "value", kind)
        super().__init__(f"Cannot parse {text!r} as {kind_name}")


__all__ = ["OptionError", "NotFound", "BadCast", "ParseError"]

"""base95 — fractional order keys in printable ASCII."""

from base95.domain.keys import Base95, KeyParseError, ParseError, key_between

__version__ = "0.1.0"

__all__ = ["Base95", "KeyParseError", "ParseError", "__version__", "key_between"]

"""Constants to avoid string typos and magic numbers."""

from enum import Enum


class WordIndexName(str, Enum):
    """Word index strategy names."""
    LINEAR = "linear"
    GROUPED = "grouped"


class DictionaryFormat(str, Enum):
    """Supported dictionary file formats."""
    CSV = "csv"
    JSON = "json"


class DictionaryFields:
    """Column / field names in dictionary sources."""
    WORD = "Word"
    STRING_LENGTH = "StringLength"


class WordLengthLimits:
    """Allowed range for word length bounds (inclusive)."""
    MIN = 1
    MAX = 14


class WordCountLimits:
    """Allowed range for the number of words in a password (inclusive)."""
    MIN = 1
    MAX = 24


class Scaffold:
    """Constants for the symbol/digit scaffold around the words."""
    DEFAULT_SYMBOLS = "!@#$%^&*()-_=+~"
    NUMBER_MIN = 0
    NUMBER_MAX = 99
    NUMBER_WIDTH = 2  # zero-padded, e.g. "07"


class ErrorResponseFields:
    """JSON field names for error responses."""
    ERROR = "error"
    DETAIL = "detail"

"""Dictionary loading infrastructure."""

from composer.infrastructure.dictionary_loader import (
    detect_format,
    load_dictionary_file,
    parse_dictionary,
)
from composer.infrastructure.dictionary_client import DictionaryClient

__all__ = [
    "detect_format",
    "load_dictionary_file",
    "parse_dictionary",
    "DictionaryClient",
]

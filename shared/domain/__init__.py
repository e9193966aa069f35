"""Domain models, errors, and constants."""

from shared.domain.models import (
    DictionaryEntry,
    Dictionary,
    PasswordSpec,
    DictionaryRecord,
    GeneratePasswordRequest,
    GeneratePasswordResponse,
)
from shared.domain.errors import (
    PasswordGenerationError,
    InvalidDictionary,
    InvalidBounds,
    NoEligibleWords,
)
from shared.domain.consts import (
    WordIndexName,
    DictionaryFormat,
    DictionaryFields,
    WordLengthLimits,
    WordCountLimits,
    Scaffold,
    ErrorResponseFields,
)

__all__ = [
    "DictionaryEntry",
    "Dictionary",
    "PasswordSpec",
    "DictionaryRecord",
    "GeneratePasswordRequest",
    "GeneratePasswordResponse",
    "PasswordGenerationError",
    "InvalidDictionary",
    "InvalidBounds",
    "NoEligibleWords",
    "WordIndexName",
    "DictionaryFormat",
    "DictionaryFields",
    "WordLengthLimits",
    "WordCountLimits",
    "Scaffold",
    "ErrorResponseFields",
]

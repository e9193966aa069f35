"""Errors raised while loading dictionaries and generating passwords."""


class PasswordGenerationError(Exception):
    """Base class for all password generation errors."""


class InvalidDictionary(PasswordGenerationError):
    """Dictionary is missing, empty, or malformed beyond recovery."""


class InvalidBounds(PasswordGenerationError):
    """Word length bounds or word count are out of the supported range."""


class NoEligibleWords(PasswordGenerationError):
    """No dictionary entry has a length inside the requested bounds."""

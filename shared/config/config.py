"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


def _get_env_float(key: str, default: str) -> float:
    """Get float environment variable with validation."""
    try:
        return float(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid float value for {key}")


class Config:
    """Centralized configuration from environment variables."""
    
    # Password shape defaults (used when the caller does not pass them)
    MIN_WORD_LENGTH: int = _get_env_int("MIN_WORD_LENGTH", "4")
    MAX_WORD_LENGTH: int = _get_env_int("MAX_WORD_LENGTH", "8")
    WORD_COUNT: int = _get_env_int("WORD_COUNT", "3")
    
    # Word index strategy: "grouped" (pre-built length groups) or "linear" (scan per query)
    WORD_INDEX: str = os.getenv("WORD_INDEX", "grouped")
    
    # Scaffold symbols, one character each
    SYMBOLS: str = os.getenv("SYMBOLS", "!@#$%^&*()-_=+~")
    
    # Dictionary source: URL wins over file when set
    DICTIONARY_FILE: str = os.getenv("DICTIONARY_FILE", "data/dictionary.csv")
    DICTIONARY_URL: str = os.getenv("DICTIONARY_URL", "").strip()
    
    # Timeouts
    DICTIONARY_REQUEST_TIMEOUT: float = _get_env_float("DICTIONARY_REQUEST_TIMEOUT", "10.0")


config = Config()

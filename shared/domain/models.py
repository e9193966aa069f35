"""Domain models for dictionaries, password specs, and API payloads."""

from dataclasses import dataclass
from typing import List, Optional, Sequence
from pydantic import BaseModel, Field, model_validator, ConfigDict
from shared.domain.consts import DictionaryFields, WordCountLimits, WordLengthLimits


@dataclass(frozen=True)
class DictionaryEntry:
    """A single dictionary word and its character count."""
    word: str
    length: int  # == len(word)


# Loaded once, never mutated while passwords are generated from it
Dictionary = Sequence[DictionaryEntry]


@dataclass(frozen=True)
class PasswordSpec:
    """Parameters for a single password generation call."""
    min_word_length: int
    max_word_length: int
    word_count: int


class DictionaryRecord(BaseModel):
    """
    Raw dictionary row as found in CSV/JSON sources.
    
    Validates the record at the load boundary so the core only ever sees
    clean DictionaryEntry values.
    """
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)
    
    word: str = Field(..., alias=DictionaryFields.WORD, min_length=1)
    length: int = Field(..., alias=DictionaryFields.STRING_LENGTH, ge=1)
    
    @model_validator(mode='after')
    def validate_length(self) -> 'DictionaryRecord':
        """Validate that the declared length matches the word."""
        if self.length != len(self.word):
            raise ValueError(
                f"{DictionaryFields.STRING_LENGTH} ({self.length}) does not match "
                f"length of '{self.word}' ({len(self.word)})"
            )
        return self
    
    def to_entry(self) -> DictionaryEntry:
        """Convert to the core DictionaryEntry type."""
        return DictionaryEntry(word=self.word, length=self.length)


class GeneratePasswordRequest(BaseModel):
    """Payload for generate request. Omitted fields fall back to config."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "min_word_length": 4,
                "max_word_length": 8,
                "word_count": 3,
                "count": 1,
            }
        }
    )
    
    min_word_length: Optional[int] = Field(
        None,
        ge=WordLengthLimits.MIN,
        le=WordLengthLimits.MAX,
        description="Minimum word length",
    )
    max_word_length: Optional[int] = Field(
        None,
        ge=WordLengthLimits.MIN,
        le=WordLengthLimits.MAX,
        description="Maximum word length",
    )
    word_count: Optional[int] = Field(
        None,
        ge=WordCountLimits.MIN,
        le=WordCountLimits.MAX,
        description="Number of words per password",
    )
    count: int = Field(1, ge=1, le=100, description="Number of passwords to generate")


class GeneratePasswordResponse(BaseModel):
    """Generated passwords."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {"passwords": ["%%42*horse*BATTERY*staple*07%%"]}
        }
    )
    
    passwords: List[str] = Field(..., description="Generated passwords")

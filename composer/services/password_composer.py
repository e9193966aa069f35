"""Password composer: assembles words and a symbol/digit scaffold into a password."""

import logging
import random
from typing import List, Optional, Sequence
from shared.config.config import config
from shared.domain.models import Dictionary, PasswordSpec
from shared.domain.errors import InvalidDictionary, InvalidBounds, NoEligibleWords
from shared.domain.consts import WordLengthLimits, WordCountLimits, Scaffold
from shared.factories.index_factory import create_index
from shared.interfaces.word_index import WordIndex

logger = logging.getLogger(__name__)


class PasswordComposer:
    """
    Generates passwords of the form:
    
        {O}{O}{NN}{I}{word0}{I}{WORD1}{I}...{wordN}{I}{NN}{O}{O}
    
    where O (outside) and I (inside) are symbols drawn independently from the
    symbol set, NN are independent two-digit numbers, and words at odd
    positions are upper-cased.
    
    Thread-safety: generate() keeps no state between calls. Each composer owns
    its own random.Random, so concurrent composers never contend on the
    module-level RNG. Share a composer across threads only if the supplied
    index is thread-safe (both built-in indexes are).
    """
    
    def __init__(
        self,
        index: Optional[WordIndex] = None,
        rng: Optional[random.Random] = None,
        symbols: Optional[str] = None,
    ) -> None:
        self.index = index if index is not None else create_index(config.WORD_INDEX)
        self.rng = rng if rng is not None else random.Random()
        self.symbols = symbols if symbols is not None else config.SYMBOLS
        if not self.symbols:
            raise ValueError("Symbol set must not be empty")
    
    def generate(self, dictionary: Optional[Dictionary], spec: PasswordSpec) -> str:
        """
        Generate one password from `dictionary` according to `spec`.
        
        Validation happens before any random draw, so a failed call produces
        no output at all.
        
        Returns:
            The generated password.
            
        Raises:
            InvalidDictionary: If dictionary is None or empty.
            InvalidBounds: If bounds or word count are out of range, or min > max.
            NoEligibleWords: If no dictionary word length falls inside the bounds.
        """
        if not dictionary:
            raise InvalidDictionary("Dictionary is missing or empty")
        self._validate_spec(spec)
        
        eligible_lengths = self.index.unique_lengths_in_range(
            dictionary, spec.min_word_length, spec.max_word_length
        )
        if not eligible_lengths:
            raise NoEligibleWords(
                f"No words with length in [{spec.min_word_length}, {spec.max_word_length}]"
            )
        
        lengths = self._sample_lengths(sorted(eligible_lengths), spec.word_count)
        words = [self._pick_word(dictionary, length) for length in lengths]
        words = self._alternate_case(words)
        
        logger.debug(
            f"Composing password from {spec.word_count} words "
            f"(eligible lengths: {sorted(eligible_lengths)}, chosen: {lengths})"
        )
        
        return self._scaffold(words)
    
    def _validate_spec(self, spec: PasswordSpec) -> None:
        """Raise InvalidBounds unless every spec field is within the supported range."""
        for name, value in (
            ("min_word_length", spec.min_word_length),
            ("max_word_length", spec.max_word_length),
        ):
            if not WordLengthLimits.MIN <= value <= WordLengthLimits.MAX:
                raise InvalidBounds(
                    f"{name} ({value}) must be within "
                    f"[{WordLengthLimits.MIN}, {WordLengthLimits.MAX}]"
                )
        
        if spec.min_word_length > spec.max_word_length:
            raise InvalidBounds(
                f"min_word_length ({spec.min_word_length}) must be <= "
                f"max_word_length ({spec.max_word_length})"
            )
        
        if not WordCountLimits.MIN <= spec.word_count <= WordCountLimits.MAX:
            raise InvalidBounds(
                f"word_count ({spec.word_count}) must be within "
                f"[{WordCountLimits.MIN}, {WordCountLimits.MAX}]"
            )
    
    def _sample_lengths(self, eligible_lengths: Sequence[int], word_count: int) -> List[int]:
        """Draw `word_count` lengths uniformly, with replacement."""
        return [self.rng.choice(eligible_lengths) for _ in range(word_count)]
    
    def _pick_word(self, dictionary: Dictionary, length: int) -> str:
        """Draw one word of `length` uniformly."""
        candidates = self.index.words_of_length(dictionary, length)
        if not candidates:
            # Only reachable with an index that disagrees with itself
            raise NoEligibleWords(f"No words of length {length}")
        return self.rng.choice(candidates)
    
    @staticmethod
    def _alternate_case(words: Sequence[str]) -> List[str]:
        """Upper-case words at odd (0-based) positions, keep the rest as stored."""
        return [word.upper() if i % 2 == 1 else word for i, word in enumerate(words)]
    
    def _scaffold(self, words: Sequence[str]) -> str:
        """Wrap words in the outside/inside symbols and two-digit numbers."""
        outside = self.rng.choice(self.symbols) * 2
        inside = self.rng.choice(self.symbols)
        left_number = self._two_digit_number()
        right_number = self._two_digit_number()
        
        left = f"{outside}{left_number}{inside}"
        middle = "".join(f"{word}{inside}" for word in words)
        right = f"{right_number}{outside}"
        return left + middle + right
    
    def _two_digit_number(self) -> str:
        value = self.rng.randint(Scaffold.NUMBER_MIN, Scaffold.NUMBER_MAX)
        return f"{value:0{Scaffold.NUMBER_WIDTH}d}"

"""Abstract word index interface."""

from abc import ABC, abstractmethod
from typing import List, Set
from shared.domain.models import Dictionary


class WordIndex(ABC):
    """Abstract word index interface.
    
    All word indexes must implement:
    - words_of_length: Return the words of an exact length
    - unique_lengths_in_range: Return the distinct lengths inside [min, max]
    
    Implementations never introduce randomness: the same dictionary (in the
    same order) always yields the same answers.
    """
    
    @abstractmethod
    def words_of_length(self, dictionary: Dictionary, length: int) -> List[str]:
        """Return every word whose length equals `length`.
        
        Args:
            dictionary: Loaded dictionary entries
            length: Exact word length to match
            
        Returns:
            Matching words in dictionary order (possibly empty)
        """
        pass
    
    @abstractmethod
    def unique_lengths_in_range(
        self,
        dictionary: Dictionary,
        min_length: int,
        max_length: int,
    ) -> Set[int]:
        """Return the distinct word lengths present within [min_length, max_length].
        
        Returns:
            Set of lengths; empty when nothing falls in range. Callers decide
            whether an empty result is an error.
        """
        pass

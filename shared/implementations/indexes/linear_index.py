"""Linear-scan word index implementation."""

from typing import List, Set
from shared.domain.models import Dictionary
from shared.interfaces.word_index import WordIndex


class LinearWordIndex(WordIndex):
    """Scans every dictionary entry on each query.
    
    No setup cost and no state, O(n) per query.
    """
    
    def words_of_length(self, dictionary: Dictionary, length: int) -> List[str]:
        return [entry.word for entry in dictionary if entry.length == length]
    
    def unique_lengths_in_range(
        self,
        dictionary: Dictionary,
        min_length: int,
        max_length: int,
    ) -> Set[int]:
        return {
            entry.length
            for entry in dictionary
            if min_length <= entry.length <= max_length
        }
